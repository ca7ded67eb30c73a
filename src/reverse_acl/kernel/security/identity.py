"""Kernel security – user and role security identities.

A security identity is a tagged variant: every concrete identity exposes a
class-level ``kind`` tag, and consumers dispatch on that tag.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, ClassVar, Union

from reverse_acl.kernel.errors import InvalidArgumentError


class SecurityIdentityKind(str, Enum):
    USER = "user"
    ROLE = "role"


@dataclasses.dataclass(frozen=True)
class UserSecurityIdentity:
    """Identity of a single user account.

    ``class_name`` is the account class the username belongs to; the pair is
    what makes a user unique in the security identity table.
    """

    kind: ClassVar[SecurityIdentityKind] = SecurityIdentityKind.USER

    username: str
    class_name: str

    def __post_init__(self) -> None:
        if not self.username:
            raise InvalidArgumentError("username must not be empty")
        if not self.class_name:
            raise InvalidArgumentError("class_name must not be empty")

    @classmethod
    def from_account(cls, account: Any) -> "UserSecurityIdentity":
        """Build an identity from any object exposing a ``username`` attribute."""
        username = getattr(account, "username", None)
        if username is None:
            raise InvalidArgumentError(
                f"{type(account).__name__} has no 'username' attribute"
            )
        account_cls = type(account)
        return cls(str(username), f"{account_cls.__module__}.{account_cls.__qualname__}")

    def __str__(self) -> str:
        return f"UserSecurityIdentity({self.username}, {self.class_name})"


@dataclasses.dataclass(frozen=True)
class RoleSecurityIdentity:
    """Identity of a role (e.g. ``ROLE_ADMIN``)."""

    kind: ClassVar[SecurityIdentityKind] = SecurityIdentityKind.ROLE

    role: str

    def __post_init__(self) -> None:
        if not self.role:
            raise InvalidArgumentError("role must not be empty")

    def __str__(self) -> str:
        return f"RoleSecurityIdentity({self.role})"


SecurityIdentity = Union[UserSecurityIdentity, RoleSecurityIdentity]


__all__ = [
    "RoleSecurityIdentity",
    "SecurityIdentity",
    "SecurityIdentityKind",
    "UserSecurityIdentity",
]
