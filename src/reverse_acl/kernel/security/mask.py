"""Kernel security – permission bit-masks and granting strategies.

The mask constants follow the conventional ACL layout so that masks written by
the forward permission-checking engine are understood here unchanged.
"""
from __future__ import annotations

from enum import Enum


class GrantingStrategy(str, Enum):
    """How an ACE mask is compared against a required mask.

    The values are the literal tags stored in the entry table's
    ``granting_strategy`` column.
    """

    ALL = "all"
    ANY = "any"
    EQUAL = "equal"


class MaskBuilder:
    """Fluent builder for integer permission masks.

    Example::

        mask = MaskBuilder().add("view").add(MaskBuilder.MASK_EDIT).get()
        assert mask == 5
    """

    MASK_VIEW = 1
    MASK_CREATE = 2
    MASK_EDIT = 4
    MASK_DELETE = 8
    MASK_UNDELETE = 16
    MASK_OPERATOR = 32
    MASK_MASTER = 64
    MASK_OWNER = 128
    MASK_IDDQD = 1073741823

    def __init__(self, mask: int = 0) -> None:
        if not isinstance(mask, int) or isinstance(mask, bool):
            raise TypeError("mask must be an integer")
        self._mask = mask

    @classmethod
    def resolve(cls, mask: int | str) -> int:
        """Return the integer value for a mask constant name or pass an int through."""
        if isinstance(mask, str):
            name = f"MASK_{mask.upper()}"
            value = getattr(cls, name, None)
            if not isinstance(value, int):
                raise ValueError(f"The mask {name!r} is not defined")
            return value
        if not isinstance(mask, int) or isinstance(mask, bool):
            raise TypeError("mask must be a string or an integer")
        return mask

    def add(self, mask: int | str) -> "MaskBuilder":
        self._mask |= self.resolve(mask)
        return self

    def remove(self, mask: int | str) -> "MaskBuilder":
        self._mask &= ~self.resolve(mask)
        return self

    def get(self) -> int:
        return self._mask

    def reset(self) -> "MaskBuilder":
        self._mask = 0
        return self


__all__ = ["GrantingStrategy", "MaskBuilder"]
