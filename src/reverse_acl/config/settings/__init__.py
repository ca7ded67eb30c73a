"""Config settings – env-based configuration of the ACL schema."""
from reverse_acl.config.settings.base import Settings
from reverse_acl.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from reverse_acl.config.settings.tables import AclTableSettings

__all__ = ["AclTableSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
