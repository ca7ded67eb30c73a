"""SQLAlchemy adapter — ReverseSearchAclProvider.

The inverse of a permission check: given a security identity and a
permission, find every object identity (and every class, class field and
object field) for which some granting ACE satisfies the permission.

The provider is stateless: every call builds its statement, borrows one
connection from the engine, runs one query and gives the connection back.
Nothing is cached.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlalchemy.engine import RowMapping

from reverse_acl.adapters.sqlalchemy.fragments import BoundQuery
from reverse_acl.adapters.sqlalchemy.query import (
    build_allowed_entries_query,
    build_object_identities_query,
)
from reverse_acl.adapters.sqlalchemy.schema import AclSchema
from reverse_acl.adapters.sqlalchemy.shaper import shape_allowed_entries
from reverse_acl.config import AclTableSettings
from reverse_acl.kernel.errors import AclError, DescendantSearchNotImplementedError
from reverse_acl.kernel.security.ace_filter import AceFilter
from reverse_acl.kernel.security.object_identity import ObjectIdentity
from reverse_acl.kernel.security.permission_map import PermissionMap
from reverse_acl.kernel.security.reverse_search import ReverseSearchResult
from reverse_acl.observability.logging import get_logger

AceFilterArg = AceFilter | Mapping[str, Any] | None
QueryBuilder = Callable[[AclSchema, PermissionMap, Any, str, AceFilterArg], BoundQuery]


class ReverseSearchAclProvider:
    """Reverse search over the relational ACL tables.

    Parameters
    ----------
    engine:
        Anything whose ``connect()`` returns a SQLAlchemy ``Connection``
        context manager, usually an :class:`~sqlalchemy.engine.Engine`.
    tables:
        Names of the ACL tables.
    permission_map:
        Resolves permission names into the masks that satisfy them.

    Example::

        provider = ReverseSearchAclProvider(engine, tables, BasicPermissionMap())
        provider.find_allowed_entries(RoleSecurityIdentity("ROLE_EDITOR"), "VIEW")
        # {"app.Article": ClassAccess(class_access=True, object_access={"42"}, ...)}
    """

    def __init__(
        self,
        engine: Any,
        tables: AclTableSettings,
        permission_map: PermissionMap,
    ) -> None:
        self._engine = engine
        self._schema = AclSchema(tables)
        self._permission_map = permission_map
        self._log = get_logger(__name__)

    @property
    def schema(self) -> AclSchema:
        return self._schema

    def find_object_identities(
        self,
        sid: Any,
        permission: str,
        ace_filter: AceFilterArg = None,
        find_children: bool = False,
    ) -> dict[str, list[ObjectIdentity]]:
        """Object identities *sid* holds *permission* on, grouped by class type.

        Only object-scoped entries count (with or without a field); class-level
        entries are ignored.  Each identity appears once per class type.

        Args:
            sid: User or role security identity.
            permission: Permission name known to the permission map (``"VIEW"``, ...).
            ace_filter: ``{"class": ..., "field": ...}`` or an :class:`AceFilter`.
            find_children: Must be ``False``; descendant search is not implemented.
        """
        query = self._prepare(
            "object_identities", build_object_identities_query,
            sid, permission, ace_filter, find_children,
        )
        rows = self._fetch(query)
        identities: dict[str, list[ObjectIdentity]] = {}
        for row in rows:
            class_type = row["class_type"]
            identities.setdefault(class_type, []).append(
                ObjectIdentity(str(row["object_identifier"]), class_type)
            )
        self._completed("object_identities", rows, identities)
        return identities

    def find_allowed_entries(
        self,
        sid: Any,
        permission: str,
        ace_filter: AceFilterArg = None,
        find_children: bool = False,
    ) -> ReverseSearchResult:
        """Class, class-field, object and object-field grants of *sid*, per class type.

        See :class:`~reverse_acl.kernel.security.ClassAccess` for the facets;
        arguments are the same as :meth:`find_object_identities`.
        """
        query = self._prepare(
            "allowed_entries", build_allowed_entries_query,
            sid, permission, ace_filter, find_children,
        )
        rows = self._fetch(query)
        result = shape_allowed_entries(rows)
        self._completed("allowed_entries", rows, result)
        return result

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _prepare(
        self,
        mode: str,
        builder: QueryBuilder,
        sid: Any,
        permission: str,
        ace_filter: AceFilterArg,
        find_children: bool,
    ) -> BoundQuery:
        try:
            if find_children:
                raise DescendantSearchNotImplementedError()
            ace_filter = AceFilter.coerce(ace_filter)
            query = builder(self._schema, self._permission_map, sid, permission, ace_filter)
        except AclError as exc:
            self._log.info(
                "acl.reverse_search.rejected",
                mode=mode,
                permission=permission,
                code=exc.code,
            )
            raise
        self._log.debug(
            "acl.reverse_search.query",
            mode=mode,
            permission=permission,
            class_type=ace_filter.class_type,
            field=ace_filter.field,
            parameters=sorted(query.params),
        )
        return query

    def _fetch(self, query: BoundQuery) -> Sequence[RowMapping]:
        with self._engine.connect() as conn:
            return conn.execute(query.statement, query.values()).mappings().all()

    def _completed(self, mode: str, rows: Sequence[RowMapping], result: Mapping[str, Any]) -> None:
        self._log.debug("acl.reverse_search.completed", mode=mode, rows=len(rows), classes=len(result))


__all__ = ["ReverseSearchAclProvider"]
