"""ACL errors — caller-input failures raised by the reverse search.

None of these are transient: they are surfaced immediately and never retried.
Failures coming from the database driver are *not* wrapped here; they
propagate unchanged from SQLAlchemy.
"""

from __future__ import annotations

from typing import Any

from reverse_acl.kernel.errors.base import BaseError


class AclError(BaseError):
    """Base for every error raised by the ACL components."""

    default_code = "acl_error"


class InvalidArgumentError(AclError, ValueError):
    """An argument passed to the reverse search is unusable."""

    default_code = "invalid_argument"


class UnknownPermissionError(InvalidArgumentError):
    """The permission name has no masks in the permission map."""

    default_code = "unknown_permission"

    def __init__(self, permission: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f'There are no masks in permission map for permission "{permission}"',
            detail={"permission": permission},
            **kwargs,
        )
        self.permission = permission


class UnsupportedIdentityError(InvalidArgumentError):
    """The subject is neither a user nor a role security identity."""

    default_code = "unsupported_identity"

    def __init__(self, identity: Any, **kwargs: Any) -> None:
        super().__init__(
            "Security identity must either be a user or a role security identity, "
            f"got {type(identity).__name__}",
            detail={"identity_type": type(identity).__name__},
            **kwargs,
        )
        self.identity = identity


class InvalidFilterError(InvalidArgumentError):
    """The ACE filter is malformed (e.g. a field without a class)."""

    default_code = "invalid_filter"


class DescendantSearchNotImplementedError(AclError, NotImplementedError):
    """Searching descendant object identities is not supported."""

    default_code = "descendant_search_not_implemented"

    def __init__(self, message: str = "Object identities children search is not implemented yet", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class QueryBuildError(AclError):
    """Predicate fragments could not be assembled into one query."""

    default_code = "query_build_error"


__all__ = [
    "AclError",
    "DescendantSearchNotImplementedError",
    "InvalidArgumentError",
    "InvalidFilterError",
    "QueryBuildError",
    "UnknownPermissionError",
    "UnsupportedIdentityError",
]
