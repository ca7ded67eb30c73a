"""SQLAlchemy adapter — predicate builders of the reverse ACL search.

The forward permission check walks a target's ACEs one by one and asks, per
entry, whether the entry's mask satisfies a required mask under the entry's
granting strategy.  The reverse search asks the same question for *every*
entry at once, so the strategy semantics are expressed here as SQL:

* ``all``   — every bit of the required mask is set in the entry mask
* ``any``   — at least one bit overlaps
* ``equal`` — the entry mask is exactly the required mask

Only granting entries are considered.  Denying entries never remove a grant
found elsewhere: one matching granting entry is enough.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.expression import FromClause

from reverse_acl.adapters.sqlalchemy.fragments import BoundParameter, ParamType, SqlFragment
from reverse_acl.kernel.errors import UnknownPermissionError, UnsupportedIdentityError
from reverse_acl.kernel.security.ace_filter import AceFilter
from reverse_acl.kernel.security.identity import SecurityIdentityKind
from reverse_acl.kernel.security.mask import GrantingStrategy
from reverse_acl.kernel.security.permission_map import PermissionMap

StrategyCheck = Callable[[ColumnElement[Any], ColumnElement[Any]], ColumnElement[bool]]

# (entry mask column, required mask placeholder) -> boolean clause
STRATEGY_CHECKS: Mapping[GrantingStrategy, StrategyCheck] = MappingProxyType({
    GrantingStrategy.ALL: lambda entry_mask, mask: mask == entry_mask.op("&")(mask),
    GrantingStrategy.ANY: lambda entry_mask, mask: entry_mask.op("&")(mask) != 0,
    GrantingStrategy.EQUAL: lambda entry_mask, mask: entry_mask == mask,
})


# ---------------------------------------------------------------------------
# Permission
# ---------------------------------------------------------------------------


def build_permission_predicate(
    entries: FromClause,
    permission_map: PermissionMap,
    permission: str,
) -> SqlFragment:
    """WHERE clause selecting granting entries that satisfy *permission*.

    Raises :class:`UnknownPermissionError` when the permission map has no masks
    for *permission*.
    """
    if not permission_map.contains(permission):
        raise UnknownPermissionError(permission)

    # the map wants a sample target; no particular object is involved here
    masks = list(permission_map.get_masks(permission, object()))
    if not masks:
        raise UnknownPermissionError(permission)

    params: dict[str, BoundParameter] = {}
    placeholders = []
    for index, mask in enumerate(masks):
        param = BoundParameter(f"mask{index}", int(mask), ParamType.INTEGER)
        params[param.name] = param
        placeholders.append(param.bind())

    strategy_groups = [
        and_(
            entries.c.granting_strategy == strategy.value,
            or_(*(check(entries.c.mask, placeholder) for placeholder in placeholders)),
        )
        for strategy, check in STRATEGY_CHECKS.items()
    ]
    clause = and_(entries.c.granting == true(), or_(*strategy_groups))
    return SqlFragment(clause, params)


# ---------------------------------------------------------------------------
# Subject
# ---------------------------------------------------------------------------


def security_identity_key(identity: Any) -> tuple[str, bool]:
    """Return the stored ``(identifier, username)`` pair of a security identity.

    User identities are stored as ``"<class_name>-<username>"`` with the
    ``username`` flag set; role identities as the bare role name with the flag
    cleared.
    """
    kind = getattr(identity, "kind", None)
    if kind is SecurityIdentityKind.USER:
        return f"{identity.class_name}-{identity.username}", True
    if kind is SecurityIdentityKind.ROLE:
        return identity.role, False
    raise UnsupportedIdentityError(identity)


def build_subject_predicate(
    entries: FromClause,
    security_identities: FromClause,
    identity: Any,
) -> SqlFragment:
    """JOIN condition restricting entries to those owned by *identity*."""
    identifier, is_username = security_identity_key(identity)
    identifier_param = BoundParameter("identifier", identifier, ParamType.STRING)
    username_param = BoundParameter("username", is_username, ParamType.BOOLEAN)

    clause = and_(
        security_identities.c.id == entries.c.security_identity_id,
        security_identities.c.identifier == identifier_param.bind(),
        security_identities.c.username == username_param.bind(),
    )
    return SqlFragment(
        clause,
        {identifier_param.name: identifier_param, username_param.name: username_param},
    )


# ---------------------------------------------------------------------------
# Class / field filter
# ---------------------------------------------------------------------------


def build_ace_filter_predicate(
    entries: FromClause,
    classes: FromClause,
    ace_filter: AceFilter | Mapping[str, Any] | None,
) -> SqlFragment:
    """JOIN condition to the class table, optionally narrowed to a class and field.

    The class join is always present because the class type is part of every
    result row.
    """
    ace_filter = AceFilter.coerce(ace_filter)
    conditions: list[ColumnElement[bool]] = [classes.c.id == entries.c.class_id]
    params: dict[str, BoundParameter] = {}

    if ace_filter.class_type is not None:
        class_param = BoundParameter("class_type", ace_filter.class_type, ParamType.STRING)
        conditions.append(classes.c.class_type == class_param.bind())
        params[class_param.name] = class_param

    if ace_filter.field is not None:
        field_param = BoundParameter("field_name", ace_filter.field, ParamType.STRING)
        conditions.append(entries.c.field_name == field_param.bind())
        params[field_param.name] = field_param

    return SqlFragment(and_(*conditions), params)


__all__ = [
    "STRATEGY_CHECKS",
    "build_ace_filter_predicate",
    "build_permission_predicate",
    "build_subject_predicate",
    "security_identity_key",
]
