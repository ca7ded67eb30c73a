"""
reverse_acl – reverse search over relational ACL storage.

Answers "which objects, classes and fields may this subject access with this
permission?" with a single set-based query against the ACE tables.

Import path convention::

    from reverse_acl.adapters.sqlalchemy import ReverseSearchAclProvider
    from reverse_acl.config import AclTableSettings
    from reverse_acl.kernel.security import BasicPermissionMap, UserSecurityIdentity
    from reverse_acl.kernel.errors import UnknownPermissionError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
