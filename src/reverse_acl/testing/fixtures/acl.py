"""Testing fixtures – AclFixtureWriter.

Writes ACL rows straight into the tables so tests can set up grants without
an ACL mutation API.  Every ``insert_*`` call runs in its own transaction.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy import Connection, func, select

from reverse_acl.adapters.sqlalchemy.predicates import security_identity_key
from reverse_acl.adapters.sqlalchemy.schema import AclSchema
from reverse_acl.kernel.security.mask import GrantingStrategy
from reverse_acl.kernel.security.object_identity import ObjectIdentity


class AclFixtureWriter:
    """Insert classes, identities and ACEs of the four shapes.

    Example::

        writer = AclFixtureWriter(engine, schema)
        writer.create_schema()
        writer.insert_object_ace(ObjectIdentity("id", "type"), sid, MaskBuilder.MASK_VIEW)
        writer.insert_class_field_ace("type", "name", sid, MaskBuilder.MASK_VIEW, granting=False)
    """

    def __init__(self, engine: Any, schema: AclSchema) -> None:
        self._engine = engine
        self._schema = schema

    def create_schema(self) -> None:
        self._schema.create_all(self._engine)

    # ------------------------------------------------------------------
    # ACEs
    # ------------------------------------------------------------------

    def insert_class_ace(
        self,
        class_type: str,
        sid: Any,
        mask: int,
        *,
        granting: bool = True,
        strategy: GrantingStrategy = GrantingStrategy.ALL,
    ) -> int:
        with self._engine.begin() as conn:
            return self._insert_entry(
                conn, self._class_id(conn, class_type), None, None, sid, mask, granting, strategy
            )

    def insert_class_field_ace(
        self,
        class_type: str,
        field_name: str,
        sid: Any,
        mask: int,
        *,
        granting: bool = True,
        strategy: GrantingStrategy = GrantingStrategy.ALL,
    ) -> int:
        with self._engine.begin() as conn:
            return self._insert_entry(
                conn, self._class_id(conn, class_type), None, field_name, sid, mask, granting, strategy
            )

    def insert_object_ace(
        self,
        oid: ObjectIdentity,
        sid: Any,
        mask: int,
        *,
        granting: bool = True,
        strategy: GrantingStrategy = GrantingStrategy.ALL,
    ) -> int:
        with self._engine.begin() as conn:
            class_id = self._class_id(conn, oid.type)
            oid_id = self._object_identity_id(conn, oid, class_id)
            return self._insert_entry(conn, class_id, oid_id, None, sid, mask, granting, strategy)

    def insert_object_field_ace(
        self,
        oid: ObjectIdentity,
        field_name: str,
        sid: Any,
        mask: int,
        *,
        granting: bool = True,
        strategy: GrantingStrategy = GrantingStrategy.ALL,
    ) -> int:
        with self._engine.begin() as conn:
            class_id = self._class_id(conn, oid.type)
            oid_id = self._object_identity_id(conn, oid, class_id)
            return self._insert_entry(conn, class_id, oid_id, field_name, sid, mask, granting, strategy)

    def create_object_identity(self, oid: ObjectIdentity) -> int:
        """Register *oid* without any ACE attached."""
        with self._engine.begin() as conn:
            return self._object_identity_id(conn, oid, self._class_id(conn, oid.type))

    # ------------------------------------------------------------------
    # lookups (insert on miss)
    # ------------------------------------------------------------------

    def _class_id(self, conn: Connection, class_type: str) -> int:
        classes = self._schema.classes
        found = conn.execute(
            select(classes.c.id).where(classes.c.class_type == class_type)
        ).scalar_one_or_none()
        if found is not None:
            return found
        return conn.execute(
            classes.insert().values(class_type=class_type)
        ).inserted_primary_key[0]

    def _security_identity_id(self, conn: Connection, sid: Any) -> int:
        sids = self._schema.security_identities
        identifier, is_username = security_identity_key(sid)
        found = conn.execute(
            select(sids.c.id).where(
                sids.c.identifier == identifier, sids.c.username == is_username
            )
        ).scalar_one_or_none()
        if found is not None:
            return found
        return conn.execute(
            sids.insert().values(identifier=identifier, username=is_username)
        ).inserted_primary_key[0]

    def _object_identity_id(self, conn: Connection, oid: ObjectIdentity, class_id: int) -> int:
        oids = self._schema.object_identities
        found = conn.execute(
            select(oids.c.id).where(
                oids.c.object_identifier == oid.identifier, oids.c.class_id == class_id
            )
        ).scalar_one_or_none()
        if found is not None:
            return found
        return conn.execute(
            oids.insert().values(
                object_identifier=oid.identifier,
                class_id=class_id,
                parent_object_identity_id=None,
                entries_inheriting=True,
            )
        ).inserted_primary_key[0]

    def _insert_entry(
        self,
        conn: Connection,
        class_id: int,
        oid_id: int | None,
        field_name: str | None,
        sid: Any,
        mask: int,
        granting: bool,
        strategy: GrantingStrategy,
    ) -> int:
        entries = self._schema.entries
        scope = [entries.c.class_id == class_id]
        scope.append(
            entries.c.object_identity_id.is_(None) if oid_id is None
            else entries.c.object_identity_id == oid_id
        )
        scope.append(
            entries.c.field_name.is_(None) if field_name is None
            else entries.c.field_name == field_name
        )
        next_order = conn.execute(
            select(func.coalesce(func.max(entries.c.ace_order) + 1, 0)).where(*scope)
        ).scalar_one()

        return conn.execute(
            entries.insert().values(
                class_id=class_id,
                object_identity_id=oid_id,
                field_name=field_name,
                ace_order=next_order,
                security_identity_id=self._security_identity_id(conn, sid),
                mask=mask,
                granting=granting,
                granting_strategy=GrantingStrategy(strategy).value,
                audit_success=False,
                audit_failure=False,
            )
        ).inserted_primary_key[0]


__all__ = ["AclFixtureWriter"]
