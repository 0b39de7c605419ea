from pathlib import Path

import pytest
from pydantic import BaseModel, ValidationError

from tessera.core.config import Config, CoreConfig, CoreSettings, get_config, ui_setting
from tessera.core.config import config as config_module
from tessera.core.config.config import LoggerSettings, UISettings, _AttrView, load_ini_as_dict


class TestConfig:
    """Test cases for the Config class."""

    def test_config_init_empty(self):
        config = Config()
        assert isinstance(config, dict)
        assert len(config) == 0

    def test_later_settings_override_earlier(self):
        config = Config([{"key1": "value1"}, {"key2": "value2", "key1": "override"}])
        assert config["key1"] == "override"
        assert config["key2"] == "value2"

    def test_deep_merge_keeps_sibling_keys(self):
        config = Config([{"S": {"A": 1, "B": 2}}, {"S": {"B": 3}}])
        assert config["S"] == {"A": 1, "B": 3}

    def test_attr_access(self):
        config = Config({"section": {"key": "value", "nested": {"deep": 1}}})
        assert config.section.key == "value"
        assert config.section.nested.deep == 1
        assert isinstance(config.section, _AttrView)
        with pytest.raises(AttributeError):
            _ = config.missing
        with pytest.raises(AttributeError):
            _ = config.section.missing

    def test_pydantic_models_are_dumped(self):
        class Section(BaseModel):
            KEY: str = "v"

        class Root(BaseModel):
            SECTION: Section = Section()

        config = Config(Root())
        assert config["SECTION"]["KEY"] == "v"

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            Config(42)

    def test_clone_with_overrides_leaves_original(self):
        config = Config({"S": {"A": 1}})
        clone = config.clone_with_overrides({"S": {"A": 2}})
        assert clone["S"]["A"] == 2
        assert config["S"]["A"] == 1


class TestCoreConfig:
    def test_includes_core_sections(self):
        config = CoreConfig()
        for section in ("TESSERA_LOGGER", "TESSERA_UI"):
            assert section in config

    def test_ini_defaults(self):
        config = CoreConfig()
        assert config.TESSERA_UI.LOCALE == "en"
        assert config.TESSERA_UI.GETTEXT_DOMAIN == "tessera"
        assert config.TESSERA_LOGGER.USE_STRUCTLOG is False
        assert config.TESSERA_LOGGER.STREAM_LEVEL == "ERROR"
        assert not config.TESSERA_UI.LOCALE_DIR.startswith("~")

    def test_overrides_take_precedence(self):
        config = CoreConfig({"TESSERA_UI": {"LOCALE": "de"}})
        assert config.TESSERA_UI.LOCALE == "de"
        assert config.TESSERA_UI.GETTEXT_DOMAIN == "tessera"

    def test_list_overrides(self):
        config = CoreConfig([{"TESSERA_UI": {"LOCALE": "de"}}, {"TESSERA_UI": {"LOCALE": "fr"}}])
        assert config.TESSERA_UI.LOCALE == "fr"


class TestCoreSettings:
    def test_env_overrides_ini(self, monkeypatch):
        monkeypatch.setenv("TESSERA_UI__LOCALE", "fa")
        assert CoreSettings().TESSERA_UI.LOCALE == "fa"

    def test_env_tilde_is_expanded(self, monkeypatch):
        monkeypatch.setenv("TESSERA_UI__LOCALE_DIR", "~/locales")
        assert CoreSettings().TESSERA_UI.LOCALE_DIR == str(Path("~/locales").expanduser())

    def test_section_models_are_distinct_from_field_names(self):
        fields = CoreSettings.model_fields
        assert fields["TESSERA_LOGGER"].annotation is LoggerSettings
        assert fields["TESSERA_UI"].annotation is UISettings

    def test_logger_section_falls_back_to_defaults(self, monkeypatch):
        monkeypatch.setattr(config_module, "load_ini_settings", lambda: {"TESSERA_UI": {"LOCALE_DIR": "/tmp/loc"}})
        settings = CoreSettings()
        assert settings.TESSERA_LOGGER == LoggerSettings()
        assert settings.TESSERA_UI.LOCALE_DIR == "/tmp/loc"

    def test_invalid_type_raises_validation_error(self, monkeypatch):
        monkeypatch.setenv("TESSERA_LOGGER__USE_STRUCTLOG", "not-a-bool")
        with pytest.raises(ValidationError):
            CoreSettings()


class TestHelpers:
    def test_load_ini_as_dict(self, tmp_path):
        ini = tmp_path / "test.ini"
        ini.write_text("[tessera_ui]\nlocale = fa\nlocale_dir = ~/loc\n")
        data = load_ini_as_dict(ini)
        assert data["TESSERA_UI"]["LOCALE"] == "fa"
        assert data["TESSERA_UI"]["LOCALE_DIR"] == str(Path("~/loc").expanduser())

    def test_load_ini_missing_file(self, tmp_path):
        assert load_ini_as_dict(tmp_path / "nope.ini") == {}

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_ui_setting(self):
        assert ui_setting("GETTEXT_DOMAIN") == "tessera"
        assert ui_setting("NOT_A_KEY", "fallback") == "fallback"
