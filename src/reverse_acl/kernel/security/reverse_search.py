"""Kernel security – result records of a reverse ACL search."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass
class ClassAccess:
    """Everything a subject may access within one class type.

    Each facet is ``None`` when no ACE of that shape matched; facets are
    populated independently of each other.

    * ``class_access`` — a class-wide grant, independent of object and field.
    * ``class_field_access`` — class-wide grants scoped to these fields.
    * ``object_access`` — whole-object grants for these object identifiers.
    * ``object_field_access`` — object identifier → fields granted on it.
    """

    class_access: bool | None = None
    class_field_access: set[str] | None = None
    object_access: set[str] | None = None
    object_field_access: dict[str, set[str]] | None = None

    def grant_class(self) -> None:
        self.class_access = True

    def grant_class_field(self, field_name: str) -> None:
        if self.class_field_access is None:
            self.class_field_access = set()
        self.class_field_access.add(field_name)

    def grant_object(self, identifier: str) -> None:
        if self.object_access is None:
            self.object_access = set()
        self.object_access.add(identifier)

    def grant_object_field(self, identifier: str, field_name: str) -> None:
        if self.object_field_access is None:
            self.object_field_access = {}
        self.object_field_access.setdefault(identifier, set()).add(field_name)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form with absent facets omitted and sets as sorted lists."""
        payload: dict[str, Any] = {}
        if self.class_access:
            payload["class_access"] = True
        if self.class_field_access is not None:
            payload["class_field_access"] = sorted(self.class_field_access)
        if self.object_access is not None:
            payload["object_access"] = sorted(self.object_access)
        if self.object_field_access is not None:
            payload["object_field_access"] = {
                identifier: sorted(fields)
                for identifier, fields in sorted(self.object_field_access.items())
            }
        return payload


ReverseSearchResult = dict[str, ClassAccess]


def result_to_dict(result: ReverseSearchResult) -> dict[str, dict[str, Any]]:
    """Render a whole reverse search result with :meth:`ClassAccess.to_dict`."""
    return {class_type: access.to_dict() for class_type, access in result.items()}


__all__ = ["ClassAccess", "ReverseSearchResult", "result_to_dict"]
