"""SQLAlchemy adapter — shaping of allowed-entries rows."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from reverse_acl.kernel.security.reverse_search import ClassAccess, ReverseSearchResult


def shape_allowed_entries(rows: Iterable[Mapping[str, Any]]) -> ReverseSearchResult:
    """Group ``(object_identifier, class_type, field_name)`` rows per class type.

    Each row is one of four grant shapes:

    ====================  ==========  ===========================================
    object_identifier     field_name  facet
    ====================  ==========  ===========================================
    set                   set         ``object_field_access[identifier]`` += field
    set                   empty       ``object_access`` += identifier
    empty                 set         ``class_field_access`` += field
    empty                 empty       ``class_access = True``
    ====================  ==========  ===========================================

    Row order does not matter and nothing is ever removed.
    """
    result: ReverseSearchResult = {}
    for row in rows:
        class_type = row["class_type"]
        identifier = row["object_identifier"]
        field_name = row["field_name"]

        access = result.get(class_type)
        if access is None:
            access = result[class_type] = ClassAccess()

        if identifier:
            if field_name:
                access.grant_object_field(str(identifier), field_name)
            else:
                access.grant_object(str(identifier))
        elif field_name:
            access.grant_class_field(field_name)
        else:
            access.grant_class()
    return result


__all__ = ["shape_allowed_entries"]
