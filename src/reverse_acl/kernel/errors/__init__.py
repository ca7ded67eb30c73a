"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── AclError                             (acl.py)
        ├── InvalidArgumentError             (also ValueError)
        │   ├── UnknownPermissionError
        │   ├── UnsupportedIdentityError
        │   └── InvalidFilterError
        ├── DescendantSearchNotImplementedError (also NotImplementedError)
        └── QueryBuildError

Configuration errors live in :mod:`reverse_acl.config.validation`.
"""

from reverse_acl.kernel.errors.acl import (
    AclError,
    DescendantSearchNotImplementedError,
    InvalidArgumentError,
    InvalidFilterError,
    QueryBuildError,
    UnknownPermissionError,
    UnsupportedIdentityError,
)
from reverse_acl.kernel.errors.base import BaseError

__all__ = [
    "AclError",
    "BaseError",
    "DescendantSearchNotImplementedError",
    "InvalidArgumentError",
    "InvalidFilterError",
    "QueryBuildError",
    "UnknownPermissionError",
    "UnsupportedIdentityError",
]
