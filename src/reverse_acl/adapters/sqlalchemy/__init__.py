"""SQLAlchemy adapter – schema, predicate builders and the reverse search provider."""
from reverse_acl.adapters.sqlalchemy.fragments import BoundParameter, BoundQuery, ParamType, SqlFragment
from reverse_acl.adapters.sqlalchemy.predicates import (
    STRATEGY_CHECKS,
    build_ace_filter_predicate,
    build_permission_predicate,
    build_subject_predicate,
    security_identity_key,
)
from reverse_acl.adapters.sqlalchemy.provider import ReverseSearchAclProvider
from reverse_acl.adapters.sqlalchemy.query import (
    build_allowed_entries_query,
    build_object_identities_query,
)
from reverse_acl.adapters.sqlalchemy.schema import AclSchema
from reverse_acl.adapters.sqlalchemy.shaper import shape_allowed_entries

__all__ = [
    "AclSchema",
    "BoundParameter",
    "BoundQuery",
    "ParamType",
    "ReverseSearchAclProvider",
    "STRATEGY_CHECKS",
    "SqlFragment",
    "build_ace_filter_predicate",
    "build_allowed_entries_query",
    "build_object_identities_query",
    "build_permission_predicate",
    "build_subject_predicate",
    "security_identity_key",
    "shape_allowed_entries",
]
