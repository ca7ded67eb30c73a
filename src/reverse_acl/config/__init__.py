"""Config – table-name settings, loaders and validation errors."""

from reverse_acl.config.settings import AclTableSettings, EnvSettingsLoader, Settings, SettingsLoader
from reverse_acl.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "AclTableSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
