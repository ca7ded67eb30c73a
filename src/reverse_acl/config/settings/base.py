"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from reverse_acl.config.validation import MissingRequiredSettingError

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Base class for settings dataclasses.

    ``_prefix`` names the environment variable namespace read by
    :class:`~reverse_acl.config.settings.loaders.EnvSettingsLoader`;
    :meth:`from_options` builds the same settings from a plain mapping.
    Subclasses validate in :meth:`_validate`, which runs on construction.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def from_options(cls: type[S], options: Mapping[str, Any]) -> S:
        """Build from an options mapping keyed by field name; unknown keys are ignored."""
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            if field.name in options:
                kwargs[field.name] = options[field.name]
            elif field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                raise MissingRequiredSettingError(field.name)
        return cls(**kwargs)


__all__ = ["Settings"]
