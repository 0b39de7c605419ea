import configparser
import os
from copy import deepcopy
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from pydantic_settings import BaseSettings


class LoggerSettings(BaseModel):
    USE_STRUCTLOG: bool = False
    STREAM_LEVEL: str = "ERROR"


class UISettings(BaseModel):
    LOCALE: str = "en"
    LOCALE_DIR: str
    GETTEXT_DOMAIN: str = "tessera"


def load_ini_as_dict(ini_path: Path) -> Dict[str, Any]:
    """
    Load and parse an INI file into a nested dictionary with normalized keys.

    Sections and keys are converted to uppercase for uniform access. Tilde (`~`)
    in values is expanded to the user home directory.

    Args:
        ini_path (Path): Path to the `.ini` configuration file.

    Returns:
        Dict[str, Any]: A dictionary where each section is a key mapped to another
        dictionary of key-value pairs from that section.

    Example:
        .. code-block:: ini

            [tessera_ui]
            locale = fa

        .. code-block:: python

            config = load_ini_as_dict(Path("config.ini"))
            print(config["TESSERA_UI"]["LOCALE"])
    """
    if not ini_path.exists():
        return {}

    config = configparser.ConfigParser(interpolation=configparser.ExtendedInterpolation())
    config.optionxform = str
    config.read(ini_path)

    result = {}
    for section in config.sections():
        result[section.upper()] = {
            key.upper(): os.path.expanduser(value) if value.startswith("~") else value
            for key, value in config[section].items()
        }
    return result


def load_ini_settings() -> Dict[str, Any]:
    ini_path = Path(__file__).parent / "config.ini"
    return load_ini_as_dict(ini_path)


class CoreSettings(BaseSettings):
    TESSERA_LOGGER: LoggerSettings = LoggerSettings()
    TESSERA_UI: UISettings

    model_config = {
        "env_nested_delimiter": "__",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        def _expand_tilde(obj):
            if isinstance(obj, str):
                return os.path.expanduser(obj) if obj.startswith("~") else obj
            if isinstance(obj, dict):
                return {k: _expand_tilde(v) for k, v in obj.items()}
            if isinstance(obj, (list, tuple, set)):
                t = type(obj)
                return t(_expand_tilde(v) for v in obj)
            return obj

        def env_settings_expanded():
            data = env_settings()
            return _expand_tilde(data)

        return (
            init_settings,  # constructor kwargs
            env_settings_expanded,  # env vars (with '~' expanded) take precedence
            dotenv_settings,  # then .env
            load_ini_settings,  # then INI file (lowest precedence)
            file_secret_settings,
        )


SettingsLike = Union[
    Dict[str, Any],
    List[Union[Dict[str, Any], BaseSettings, BaseModel]],
    BaseSettings,
    BaseModel,
    None,
]


class _AttrView:
    """
    Lightweight attribute-access wrapper around a mapping.

    Enables access like obj.SECTION.KEY for nested dictionaries.
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    def __getattr__(self, name: str):
        if name in self._data:
            value = self._data[name]
            if isinstance(value, dict):
                return _AttrView(value)
            return value
        raise AttributeError(f"No such attribute: {name}")

    def __getitem__(self, key: str):
        value = self._data[key]
        if isinstance(value, dict):
            return _AttrView(value)
        return value

    def __repr__(self) -> str:
        return f"_AttrView({self._data!r})"


class Config(dict):
    """
    Unified configuration mapping for Tessera components.

    The `Config` class consolidates configuration from dictionaries and Pydantic `BaseSettings` or `BaseModel`
    objects, merged in order so later items override earlier ones. Nested sections can be read either dict-style
    (`config["TESSERA_UI"]["LOCALE"]`) or attribute-style (`config.TESSERA_UI.LOCALE`).

    Args:
        extra_settings: Configuration overrides or full config objects.
            Can be a `dict`, `BaseSettings`, `BaseModel`, or list of any of these.

    Example:
        >>> from tessera.core.config import Config, CoreSettings
        >>> config = Config(CoreSettings())
        >>> config.TESSERA_UI.LOCALE
        'en'
    """

    def __init__(self, extra_settings: SettingsLike = None):
        merged: Dict[str, Any] = {}
        for override in self._normalize(extra_settings):
            merged = self._deep_update(merged, override)
        super().__init__(merged)

    def __getattr__(self, name: str):
        """Enable attribute-style access for top-level keys."""
        if name in self:
            value = self[name]
            if isinstance(value, dict):
                return _AttrView(value)
            return value
        raise AttributeError(f"No such attribute: {name}")

    def clone_with_overrides(self, *overrides: SettingsLike) -> "Config":
        """Return a new Config clone with overrides applied (original remains unchanged)."""
        items: List[Any] = [deepcopy(dict(self))]
        for override in overrides:
            items.extend(self._normalize(override))
        return Config(items)

    @staticmethod
    def _normalize(settings: SettingsLike) -> List[Dict[str, Any]]:
        if settings is None:
            return []
        if isinstance(settings, (BaseSettings, BaseModel)):
            return [settings.model_dump()]
        if isinstance(settings, dict):
            return [settings]
        if isinstance(settings, list):
            out: List[Dict[str, Any]] = []
            for item in settings:
                out.extend(Config._normalize(item))
            return out
        raise TypeError(f"Unsupported settings type: {type(settings).__name__}")

    @staticmethod
    def _deep_update(base: dict, override: dict) -> dict:
        """Recursively update nested dictionaries."""
        for k, v in override.items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                base[k] = Config._deep_update(base.get(k, {}), v)
            else:
                base[k] = deepcopy(v)
        return base


class CoreConfig(Config):
    """
    Wrapper around `Config` that always includes `CoreSettings` by default.

    Usage:
        from tessera.core.config import CoreConfig
        cfg = CoreConfig()  # loads CoreSettings (env + .env + INI with '~' expansion)

    Extra overrides are applied on top of CoreSettings and take the highest precedence.
    """

    def __init__(self, extra_settings: SettingsLike = None):
        if extra_settings is None:
            extras: List[Any] = [CoreSettings()]
        elif isinstance(extra_settings, list):
            extras = [CoreSettings()] + extra_settings
        else:
            extras = [CoreSettings(), extra_settings]
        super().__init__(extras)


@lru_cache(maxsize=1)
def get_config() -> CoreConfig:
    """Return the process-wide default configuration, built once on first use."""
    return CoreConfig()


def ui_setting(name: str, default: Optional[Any] = None) -> Any:
    """Read a single key from the `TESSERA_UI` section of the default configuration."""
    return get_config().get("TESSERA_UI", {}).get(name, default)
