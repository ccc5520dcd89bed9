import json
from typing import Any, Dict, List, Optional

from mywx_pusher.errors import ConfigurationError
from mywx_pusher.types import Settings

DEFAULT_BASE_URI = "https://www.mywx.live/"
DEFAULT_INTERVAL = 10
DEFAULT_REQUEST_TIMEOUT = 10

REQUIRED_KEYS = ("station_host", "station_slug", "secret_key")

DEFAULTS: Settings = {
    "outdoor_airlink_host": None,
    "indoor_airlink_host": None,
    "base_uri": DEFAULT_BASE_URI,
    "interval": DEFAULT_INTERVAL,
    "request_timeout": DEFAULT_REQUEST_TIMEOUT,
    "debug": False,
}


def load_settings(config_path: Optional[str] = None,
                  overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """
    Build the settings for a run.

    Values are read from the JSON file at ``config_path`` when given, then
    every non-None entry of ``overrides`` (usually command line flags) replaces
    the file value, and finally defaults fill whatever is still unset.
    The result is validated before it is returned.
    """
    settings: Dict[str, Any] = {}

    if config_path:
        try:
            with open(config_path, 'r') as f:
                loaded = json.load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Settings file not found: {config_path}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Settings file {config_path} is not valid JSON: {e}")

        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Settings file {config_path} must contain a JSON object")
        settings.update(loaded)

    for key, value in (overrides or {}).items():
        if value is not None:
            settings[key] = value

    for key, value in DEFAULTS.items():
        if settings.get(key) is None:
            settings[key] = value

    validate_settings(settings)
    return settings  # type: ignore[return-value]


def validate_settings(settings: Settings) -> None:
    """Raise ConfigurationError if a required option is missing or a value is unusable"""
    missing: List[str] = [key for key in REQUIRED_KEYS if not settings.get(key)]
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

    for key in ("interval", "request_timeout"):
        value = settings.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigurationError(f"Setting '{key}' must be a positive number, got {value!r}")

    if not str(settings.get("base_uri", DEFAULT_BASE_URI)).startswith(("http://", "https://")):
        raise ConfigurationError(f"Setting 'base_uri' must be an http(s) URI, got {settings.get('base_uri')!r}")
