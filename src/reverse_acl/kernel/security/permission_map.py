"""Kernel security – PermissionMap port and the basic permission map."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Protocol

from reverse_acl.kernel.errors import UnknownPermissionError
from reverse_acl.kernel.security.mask import MaskBuilder


class PermissionMap(Protocol):
    """Port: resolve a permission name into the masks that satisfy it.

    ``get_masks`` returns masks of which *any one* is sufficient.  It takes a
    sample target object because some maps vary masks by object type.
    """

    def contains(self, permission: str) -> bool: ...
    def get_masks(self, permission: str, obj: Any) -> Sequence[int]: ...


class BasicPermissionMap:
    """Standard permission hierarchy: a higher permission implies lower ones.

    For example an ACE granting ``EDIT`` also satisfies a ``VIEW`` check, and
    ``OWNER`` satisfies everything.
    """

    PERMISSION_VIEW = "VIEW"
    PERMISSION_EDIT = "EDIT"
    PERMISSION_CREATE = "CREATE"
    PERMISSION_DELETE = "DELETE"
    PERMISSION_UNDELETE = "UNDELETE"
    PERMISSION_OPERATOR = "OPERATOR"
    PERMISSION_MASTER = "MASTER"
    PERMISSION_OWNER = "OWNER"

    _MAP: Mapping[str, tuple[int, ...]] = MappingProxyType({
        PERMISSION_VIEW: (
            MaskBuilder.MASK_VIEW,
            MaskBuilder.MASK_EDIT,
            MaskBuilder.MASK_OPERATOR,
            MaskBuilder.MASK_MASTER,
            MaskBuilder.MASK_OWNER,
        ),
        PERMISSION_EDIT: (
            MaskBuilder.MASK_EDIT,
            MaskBuilder.MASK_OPERATOR,
            MaskBuilder.MASK_MASTER,
            MaskBuilder.MASK_OWNER,
        ),
        PERMISSION_CREATE: (
            MaskBuilder.MASK_CREATE,
            MaskBuilder.MASK_OPERATOR,
            MaskBuilder.MASK_MASTER,
            MaskBuilder.MASK_OWNER,
        ),
        PERMISSION_DELETE: (
            MaskBuilder.MASK_DELETE,
            MaskBuilder.MASK_OPERATOR,
            MaskBuilder.MASK_MASTER,
            MaskBuilder.MASK_OWNER,
        ),
        PERMISSION_UNDELETE: (
            MaskBuilder.MASK_UNDELETE,
            MaskBuilder.MASK_OPERATOR,
            MaskBuilder.MASK_MASTER,
            MaskBuilder.MASK_OWNER,
        ),
        PERMISSION_OPERATOR: (
            MaskBuilder.MASK_OPERATOR,
            MaskBuilder.MASK_MASTER,
            MaskBuilder.MASK_OWNER,
        ),
        PERMISSION_MASTER: (
            MaskBuilder.MASK_MASTER,
            MaskBuilder.MASK_OWNER,
        ),
        PERMISSION_OWNER: (
            MaskBuilder.MASK_OWNER,
        ),
    })

    def contains(self, permission: str) -> bool:
        return permission in self._MAP

    def get_masks(self, permission: str, obj: Any) -> Sequence[int]:  # noqa: ARG002
        try:
            return list(self._MAP[permission])
        except KeyError:
            raise UnknownPermissionError(permission) from None


__all__ = ["BasicPermissionMap", "PermissionMap"]
