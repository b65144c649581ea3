import configparser
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import BaseModel
from pydantic_settings import BaseSettings

ENV_PREFIX = "COMMENTDECK_"


class COMMENTDECK_API(BaseModel):
    COMMENTS_URL: str
    USERS_URL: str
    TIMEOUT_SECONDS: float


class COMMENTDECK_DASHBOARD(BaseModel):
    STORAGE_KEY: str
    DEFAULT_PAGE_SIZE: int


class COMMENTDECK_DIR_PATHS(BaseModel):
    ROOT: str
    LOGGER_DIR: str
    STRUCT_LOGGER_DIR: str


class COMMENTDECK_LOGGER(BaseModel):
    USE_STRUCTLOG: bool


def load_ini_as_dict(ini_path: Path) -> Dict[str, Any]:
    """
    Load and parse an INI file into a nested dictionary with normalized keys.

    Sections and keys are converted to uppercase for uniform access. Tilde (`~`)
    at the start of a value is expanded to the user home directory.

    Args:
        ini_path (Path): Path to the `.ini` configuration file.

    Returns:
        Dict[str, Any]: A dictionary where each section is a key mapped to another
        dictionary of key-value pairs from that section.

    Example:
        .. code-block:: ini

            [COMMENTDECK_API]
            comments_url = https://example.com/comments

        .. code-block:: python

            config = load_ini_as_dict(Path("config.ini"))
            print(config["COMMENTDECK_API"]["COMMENTS_URL"])
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
    COMMENTDECK_API: COMMENTDECK_API
    COMMENTDECK_DASHBOARD: COMMENTDECK_DASHBOARD
    COMMENTDECK_DIR_PATHS: COMMENTDECK_DIR_PATHS
    COMMENTDECK_LOGGER: COMMENTDECK_LOGGER

    model_config = {
        "env_nested_delimiter": "__",
        "case_sensitive": True,
        "env_file": ".env",
        "extra": "ignore",
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
            return obj

        def env_settings_expanded():
            return _expand_tilde(env_settings())

        return (
            init_settings,  # constructor kwargs
            env_settings_expanded,  # env vars (with '~' expanded) take precedence
            dotenv_settings,  # then .env
            load_ini_settings,  # then the packaged INI file (lowest precedence)
            file_secret_settings,
        )


# Union alias used across core for configuration overrides and settings
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
    Unified configuration mapping for commentdeck components.

    The `Config` class merges configuration from dictionaries and Pydantic
    `BaseSettings` / `BaseModel` objects, later entries overriding earlier ones.
    Environment variables named `COMMENTDECK_<SECTION>__<KEY>` are overlaid last.

    Args:
        extra_settings: Configuration overrides or full config objects.
            Can be a `dict`, `BaseSettings`, `BaseModel`, or list of any of these.
        apply_env: Whether to overlay environment variables on the merged result.

    Example:
        >>> from commentdeck.core.config import Config, CoreSettings
        >>> config = Config(CoreSettings())
        >>> config.COMMENTDECK_API.COMMENTS_URL
        'https://jsonplaceholder.typicode.com/comments'
    """

    def __init__(self, extra_settings: SettingsLike = None, *, apply_env: bool = True):
        merged: Dict[str, Any] = {}
        for override in self._normalize(extra_settings):
            merged = self._deep_update(merged, deepcopy(override))

        if apply_env:
            merged = self._apply_env_overrides(merged)

        super().__init__(merged)

    def __getattr__(self, name: str):
        """Enable attribute-style access for top-level keys."""
        if name in self:
            value = self[name]
            if isinstance(value, dict):
                return _AttrView(value)
            return value
        raise AttributeError(f"No such attribute: {name}")

    @staticmethod
    def _normalize(settings: SettingsLike) -> List[Dict[str, Any]]:
        if settings is None:
            return []
        if isinstance(settings, (BaseSettings, BaseModel)):
            return [settings.model_dump()]
        if isinstance(settings, dict):
            return [settings]
        items: List[Dict[str, Any]] = []
        for item in settings:
            items.extend(Config._normalize(item))
        return items

    @staticmethod
    def _deep_update(base: dict, override: dict) -> dict:
        """Recursively update nested dictionaries."""
        for k, v in (override or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                base[k] = Config._deep_update(base.get(k, {}), v)
            else:
                base[k] = v
        return base

    @staticmethod
    def _apply_env_overrides(base: dict, delimiter: str = "__") -> dict:
        result = deepcopy(base)

        def set_nested(target: dict, path: List[str], value: Any):
            node = target
            for key in path[:-1]:
                if key not in node or not isinstance(node[key], dict):
                    node[key] = {}
                node = node[key]
            node[path[-1]] = Config._coerce_env_value(value)

        for env_key, env_value in os.environ.items():
            if delimiter not in env_key or not env_key.upper().startswith(ENV_PREFIX):
                continue
            parts = [p.strip().upper() for p in env_key.split(delimiter) if p.strip()]
            if not parts:
                continue
            set_nested(result, parts, env_value)

        return result

    @staticmethod
    def _coerce_env_value(value: str) -> Any:
        lower = value.lower()
        if lower in {"true", "false"}:
            return lower == "true"
        if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
            return int(value)
        try:
            return float(value)
        except ValueError:
            pass
        return os.path.expanduser(value) if value.startswith("~") else value


class CoreConfig(Config):
    """
    Wrapper around `Config` that always includes `CoreSettings` by default.

    Usage:
        from commentdeck.core.config import CoreConfig
        cfg = CoreConfig()  # loads CoreSettings (env + .env + INI with '~' expansion)

    Extra overrides are applied on top of CoreSettings and remain highest
    precedence. Env is not re-applied at the Config layer.
    """

    def __init__(self, extra_settings: SettingsLike = None):
        extras: List[Any] = [CoreSettings()]
        extras.extend(self._normalize(extra_settings))
        super().__init__(extra_settings=extras, apply_env=False)
