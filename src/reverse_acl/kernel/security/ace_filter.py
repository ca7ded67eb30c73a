"""Kernel security – AceFilter."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from reverse_acl.kernel.errors import InvalidFilterError


@dataclasses.dataclass(frozen=True)
class AceFilter:
    """Optional restriction of a reverse search to one class, or one class field.

    Empty strings count as "not set".  A field restriction is only meaningful
    together with a class restriction.
    """

    class_type: str | None = None
    field: str | None = None

    def __post_init__(self) -> None:
        if not self.class_type:
            object.__setattr__(self, "class_type", None)
        if not self.field:
            object.__setattr__(self, "field", None)
        if self.field is not None and self.class_type is None:
            raise InvalidFilterError(
                "Class ace filter must be specified when field filter is used",
                detail={"field": self.field},
            )

    @classmethod
    def coerce(cls, value: "AceFilter | Mapping[str, Any] | None") -> "AceFilter":
        """Accept ``None``, an :class:`AceFilter` or a ``{"class": ..., "field": ...}`` mapping."""
        if value is None:
            return cls()
        if isinstance(value, AceFilter):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - {"class", "class_type", "field"}
            if unknown:
                raise InvalidFilterError(
                    f"Unknown ace filter keys: {', '.join(sorted(unknown))}",
                    detail={"keys": sorted(unknown)},
                )
            return cls(
                class_type=value.get("class") or value.get("class_type"),
                field=value.get("field"),
            )
        raise InvalidFilterError(
            f"Ace filter must be a mapping or AceFilter, got {type(value).__name__}"
        )


__all__ = ["AceFilter"]
