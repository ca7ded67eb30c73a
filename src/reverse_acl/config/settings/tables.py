"""Config settings – AclTableSettings.

Names of the four ACL tables the reverse search reads.  The names end up in
generated SQL as identifiers, so anything that is not a plain identifier is
rejected up front.
"""
from __future__ import annotations

import dataclasses
import re
from typing import ClassVar

from reverse_acl.config.settings.base import Settings
from reverse_acl.config.validation import InvalidSettingValueError

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclasses.dataclass
class AclTableSettings(Settings):
    """Table names of the ACL schema.

    Loaded from ``ACL_ENTRY_TABLE_NAME``, ``ACL_OID_TABLE_NAME``,
    ``ACL_CLASS_TABLE_NAME`` and ``ACL_SID_TABLE_NAME`` by
    :class:`~reverse_acl.config.settings.loaders.EnvSettingsLoader`.  There are
    no defaults.
    """

    _prefix: ClassVar[str] = "ACL"

    entry_table_name: str
    oid_table_name: str
    class_table_name: str
    sid_table_name: str

    def _validate(self) -> None:
        names: dict[str, str] = {}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, str) or not _IDENTIFIER_RE.match(value):
                raise InvalidSettingValueError(
                    field.name, value, "must be a plain SQL identifier"
                )
            if value in names:
                raise InvalidSettingValueError(
                    field.name, value, f"already used by {names[value]}"
                )
            names[value] = field.name


__all__ = ["AclTableSettings"]
