"""Kernel security – identities, masks, permission maps and search results."""
from reverse_acl.kernel.security.identity import (
    RoleSecurityIdentity,
    SecurityIdentity,
    SecurityIdentityKind,
    UserSecurityIdentity,
)
from reverse_acl.kernel.security.ace_filter import AceFilter
from reverse_acl.kernel.security.mask import GrantingStrategy, MaskBuilder
from reverse_acl.kernel.security.object_identity import ObjectIdentity
from reverse_acl.kernel.security.permission_map import BasicPermissionMap, PermissionMap
from reverse_acl.kernel.security.reverse_search import (
    ClassAccess,
    ReverseSearchResult,
    result_to_dict,
)

__all__ = [
    "AceFilter",
    "BasicPermissionMap",
    "ClassAccess",
    "GrantingStrategy",
    "MaskBuilder",
    "ObjectIdentity",
    "PermissionMap",
    "ReverseSearchResult",
    "RoleSecurityIdentity",
    "SecurityIdentity",
    "SecurityIdentityKind",
    "UserSecurityIdentity",
    "result_to_dict",
]
