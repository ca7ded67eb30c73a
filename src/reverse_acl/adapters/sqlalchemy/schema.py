"""SQLAlchemy adapter — AclSchema.

Core ``Table`` declarations of the relational ACL store, named from
:class:`~reverse_acl.config.AclTableSettings`.  The reverse search only reads
these tables; :meth:`AclSchema.create_all` exists for tests and bootstrap.

Layout::

    classes               (id, class_type)
    security_identities   (id, identifier, username)
    object_identities     (id, parent_object_identity_id, class_id,
                           object_identifier, entries_inheriting)
    entries               (id, class_id, object_identity_id, field_name,
                           ace_order, security_identity_id, mask, granting,
                           granting_strategy, audit_success, audit_failure)

Class-level entries have a ``NULL`` ``object_identity_id``; entries that are
not scoped to a field have a ``NULL`` ``field_name``.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    UniqueConstraint,
)

from reverse_acl.config import AclTableSettings


class AclSchema:
    """Table objects for one configured set of ACL table names."""

    def __init__(self, tables: AclTableSettings, metadata: MetaData | None = None) -> None:
        self.settings = tables
        self.metadata = metadata if metadata is not None else MetaData()

        self.classes = Table(
            tables.class_table_name,
            self.metadata,
            Column("id", Integer, primary_key=True, autoincrement=True),
            Column("class_type", String(200), nullable=False, unique=True),
        )
        self.security_identities = Table(
            tables.sid_table_name,
            self.metadata,
            Column("id", Integer, primary_key=True, autoincrement=True),
            Column("identifier", String(200), nullable=False),
            Column("username", Boolean, nullable=False),
            UniqueConstraint("identifier", "username"),
        )
        self.object_identities = Table(
            tables.oid_table_name,
            self.metadata,
            Column("id", Integer, primary_key=True, autoincrement=True),
            Column(
                "parent_object_identity_id",
                Integer,
                ForeignKey(f"{tables.oid_table_name}.id"),
                nullable=True,
            ),
            Column("class_id", Integer, ForeignKey(f"{tables.class_table_name}.id"), nullable=False),
            Column("object_identifier", String(100), nullable=False),
            Column("entries_inheriting", Boolean, nullable=False, default=True),
            UniqueConstraint("object_identifier", "class_id"),
        )
        self.entries = Table(
            tables.entry_table_name,
            self.metadata,
            Column("id", Integer, primary_key=True, autoincrement=True),
            Column("class_id", Integer, ForeignKey(f"{tables.class_table_name}.id"), nullable=False),
            Column(
                "object_identity_id",
                Integer,
                ForeignKey(f"{tables.oid_table_name}.id"),
                nullable=True,
            ),
            Column("field_name", String(50), nullable=True),
            Column("ace_order", SmallInteger, nullable=False),
            Column(
                "security_identity_id",
                Integer,
                ForeignKey(f"{tables.sid_table_name}.id"),
                nullable=False,
            ),
            Column("mask", Integer, nullable=False),
            Column("granting", Boolean, nullable=False),
            Column("granting_strategy", String(30), nullable=False),
            Column("audit_success", Boolean, nullable=False, default=False),
            Column("audit_failure", Boolean, nullable=False, default=False),
            UniqueConstraint("class_id", "object_identity_id", "field_name", "ace_order"),
        )

    def create_all(self, bind: Any) -> None:
        """Create the ACL tables on *bind* (an ``Engine`` or ``Connection``) if missing."""
        self.metadata.create_all(bind)

    def drop_all(self, bind: Any) -> None:
        self.metadata.drop_all(bind)


__all__ = ["AclSchema"]
