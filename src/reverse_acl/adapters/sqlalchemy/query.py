"""SQLAlchemy adapter — assembly of the reverse search statements.

Both statements share the same shape::

    SELECT DISTINCT o.object_identifier, c.class_type [, e.field_name]
    FROM entries e
    [LEFT OUTER] JOIN object_identities o ON o.id = e.object_identity_id
    JOIN security_identities s ON <subject predicate>
    JOIN classes c ON <class / field filter predicate>
    WHERE <permission predicate>

The object-identity statement inner-joins object identities and so only sees
object-scoped entries.  The allowed-entries statement outer-joins them so that
class-level entries (no object identity) come back too.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select

from reverse_acl.adapters.sqlalchemy.fragments import BoundQuery, SqlFragment
from reverse_acl.adapters.sqlalchemy.predicates import (
    build_ace_filter_predicate,
    build_permission_predicate,
    build_subject_predicate,
)
from reverse_acl.adapters.sqlalchemy.schema import AclSchema
from reverse_acl.kernel.security.ace_filter import AceFilter
from reverse_acl.kernel.security.permission_map import PermissionMap


def _assemble(
    schema: AclSchema,
    permission_map: PermissionMap,
    identity: Any,
    permission: str,
    ace_filter: AceFilter | Mapping[str, Any] | None,
    *,
    include_class_entries: bool,
) -> BoundQuery:
    e = schema.entries.alias("e")
    o = schema.object_identities.alias("o")
    s = schema.security_identities.alias("s")
    c = schema.classes.alias("c")

    subject = build_subject_predicate(e, s, identity)
    class_filter = build_ace_filter_predicate(e, c, ace_filter)
    granted = build_permission_predicate(e, permission_map, permission)
    params = SqlFragment.combine(subject, class_filter, granted)

    on_object = o.c.id == e.c.object_identity_id
    if include_class_entries:
        source = e.outerjoin(o, on_object)
        columns = [o.c.object_identifier, c.c.class_type, e.c.field_name]
    else:
        source = e.join(o, on_object)
        columns = [o.c.object_identifier, c.c.class_type]

    source = source.join(s, subject.clause).join(c, class_filter.clause)
    statement = select(*columns).select_from(source).where(granted.clause).distinct()
    return BoundQuery(statement, params)


def build_object_identities_query(
    schema: AclSchema,
    permission_map: PermissionMap,
    identity: Any,
    permission: str,
    ace_filter: AceFilter | Mapping[str, Any] | None = None,
) -> BoundQuery:
    """Distinct ``(object_identifier, class_type)`` pairs granted to *identity*."""
    return _assemble(
        schema, permission_map, identity, permission, ace_filter,
        include_class_entries=False,
    )


def build_allowed_entries_query(
    schema: AclSchema,
    permission_map: PermissionMap,
    identity: Any,
    permission: str,
    ace_filter: AceFilter | Mapping[str, Any] | None = None,
) -> BoundQuery:
    """Distinct ``(object_identifier, class_type, field_name)`` rows granted to *identity*.

    ``object_identifier`` is ``NULL`` for class-level entries.
    """
    return _assemble(
        schema, permission_map, identity, permission, ace_filter,
        include_class_entries=True,
    )


__all__ = ["build_allowed_entries_query", "build_object_identities_query"]
