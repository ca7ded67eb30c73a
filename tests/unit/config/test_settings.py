"""Unit tests for config settings & validation."""

import pytest

from reverse_acl.config import (
    AclTableSettings,
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

OPTIONS = {
    "entry_table_name": "acl_entries",
    "oid_table_name": "acl_object_identities",
    "class_table_name": "acl_classes",
    "sid_table_name": "acl_security_identities",
}


# ---------------------------------------------------------------------------
# AclTableSettings
# ---------------------------------------------------------------------------


class TestAclTableSettings:
    def test_from_options(self) -> None:
        settings = AclTableSettings.from_options(OPTIONS)
        assert settings.entry_table_name == "acl_entries"
        assert settings.sid_table_name == "acl_security_identities"

    def test_from_options_ignores_extra_keys(self) -> None:
        options = {**OPTIONS, "oid_ancestors_table_name": "acl_object_identity_ancestors"}
        assert AclTableSettings.from_options(options) == AclTableSettings(**OPTIONS)

    def test_from_options_missing_key(self) -> None:
        options = {k: v for k, v in OPTIONS.items() if k != "class_table_name"}
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            AclTableSettings.from_options(options)
        assert exc_info.value.setting_name == "class_table_name"

    def test_no_defaults(self) -> None:
        with pytest.raises(TypeError):
            AclTableSettings()  # type: ignore[call-arg]

    @pytest.mark.parametrize("bad", ["", "acl entries", "acl_entries;drop", "1acl", "a.b"])
    def test_rejects_non_identifier_names(self, bad: str) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            AclTableSettings(**{**OPTIONS, "entry_table_name": bad})
        assert exc_info.value.setting_name == "entry_table_name"
        assert exc_info.value.code == "invalid_setting_value"

    def test_rejects_shared_names(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            AclTableSettings(**{**OPTIONS, "oid_table_name": "acl_entries"})

    def test_config_errors_share_base(self) -> None:
        assert issubclass(InvalidSettingValueError, ConfigError)
        assert issubclass(MissingRequiredSettingError, ConfigError)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def _env(self) -> dict[str, str]:
        return {f"ACL_{k.upper()}": v for k, v in OPTIONS.items()}

    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key, value in self._env().items():
            monkeypatch.setenv(key, value)
        settings = EnvSettingsLoader().load(AclTableSettings)
        assert settings == AclTableSettings(**OPTIONS)

    def test_loads_from_explicit_mapping(self) -> None:
        env = self._env()
        env["ACL_CLASS_TABLE_NAME"] = "  my_classes  "
        settings = EnvSettingsLoader(env).load(AclTableSettings)
        assert settings.class_table_name == "my_classes"

    def test_missing_variable(self) -> None:
        env = self._env()
        del env["ACL_SID_TABLE_NAME"]
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(env).load(AclTableSettings)
        assert exc_info.value.setting_name == "ACL_SID_TABLE_NAME"

    def test_invalid_value_keeps_specific_error(self) -> None:
        env = self._env()
        env["ACL_OID_TABLE_NAME"] = "bad name"
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(env).load(AclTableSettings)
