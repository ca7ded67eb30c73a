"""SQLAlchemy adapter – predicate fragments and their bind parameters.

Every predicate builder returns a :class:`SqlFragment`: a Core boolean clause
whose placeholders are typed :func:`~sqlalchemy.bindparam` objects, plus the
values for those placeholders.  Assembly combines fragments into one
statement and one parameter map; values never end up spliced into SQL text.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from sqlalchemy import Boolean, Integer, String, bindparam
from sqlalchemy.sql.elements import BindParameter, ColumnElement
from sqlalchemy.sql.expression import Select

from reverse_acl.kernel.errors import QueryBuildError


class ParamType(str, Enum):
    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"


_SQL_TYPES: Mapping[ParamType, Any] = MappingProxyType({
    ParamType.INTEGER: Integer,
    ParamType.STRING: String,
    ParamType.BOOLEAN: Boolean,
})


@dataclasses.dataclass(frozen=True)
class BoundParameter:
    """A named value bound into a query, with an optional scalar type tag."""

    name: str
    value: Any
    type: ParamType | None = None

    def bind(self) -> BindParameter[Any]:
        """Return the placeholder to embed in a clause."""
        if self.type is None:
            return bindparam(self.name)
        return bindparam(self.name, type_=_SQL_TYPES[self.type]())


@dataclasses.dataclass(frozen=True, eq=False)
class SqlFragment:
    """A boolean clause together with the parameters it references."""

    clause: ColumnElement[bool]
    params: Mapping[str, BoundParameter] = dataclasses.field(default_factory=dict)

    @staticmethod
    def combine(*fragments: "SqlFragment") -> dict[str, BoundParameter]:
        """Merge parameter maps; a name bound by two fragments is a build error."""
        merged: dict[str, BoundParameter] = {}
        for fragment in fragments:
            for name, param in fragment.params.items():
                if name in merged:
                    raise QueryBuildError(
                        f"Bind parameter {name!r} is defined by more than one fragment",
                        detail={"parameter": name},
                    )
                merged[name] = param
        return merged


@dataclasses.dataclass(frozen=True, eq=False)
class BoundQuery:
    """A fully assembled statement and the parameters to execute it with."""

    statement: Select[Any]
    params: Mapping[str, BoundParameter]

    def values(self) -> dict[str, Any]:
        return {name: param.value for name, param in self.params.items()}


__all__ = ["BoundParameter", "BoundQuery", "ParamType", "SqlFragment"]
