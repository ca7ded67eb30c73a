"""Kernel security – ObjectIdentity."""
from __future__ import annotations

import dataclasses

from reverse_acl.kernel.errors import InvalidArgumentError


@dataclasses.dataclass(frozen=True)
class ObjectIdentity:
    """``(identifier, type)`` pair naming one securable object instance."""

    identifier: str
    type: str

    def __post_init__(self) -> None:
        if not self.identifier:
            raise InvalidArgumentError("identifier must not be empty")
        if not self.type:
            raise InvalidArgumentError("type must not be empty")

    def __str__(self) -> str:
        return f"ObjectIdentity({self.identifier}, {self.type})"


__all__ = ["ObjectIdentity"]
