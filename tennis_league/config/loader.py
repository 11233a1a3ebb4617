# tennis_league/config/loader.py
"""
Handles loading of the service configuration.

Settings come from ``appsettings.json`` (the same shape the league service
has always used), optionally overlaid by ``appsettings.{Environment}.json``,
and finally by environment variables. The ``.env`` file is loaded by the
runner before this module is used.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..errors import ConfigurationError

logger = logging.getLogger("TennisLeague.Config")

# --- Path Constants ---
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_CONFIG_FILE = "appsettings.json"
CONFIG_PATH_ENV = "TENNIS_LEAGUE_CONFIG"


class Settings(BaseModel):
    connection_string: Optional[str] = None
    database_name: Optional[str] = None
    environment: str = "Production"
    port: int = 8000
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    server_selection_timeout_ms: int = 5000
    ping_on_startup: bool = False

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


# --- Helper Functions ---
def _load_json_config(config_path: Path, required: bool = False) -> Dict[str, Any]:
    """Loads a JSON configuration file, returning an empty dict if it is absent."""
    if not config_path.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        logger.warning("Configuration file not found at %s. Using defaults.", config_path)
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8") or "{}")
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Error decoding JSON from {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root in {config_path} must be a JSON object.")
    return data


def _merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _int_or_default(val: Any, default: int, name: str) -> int:
    """Safely converts a value to an integer, falling back to a default."""
    if val is None:
        return default
    try:
        return int(val)
    except (ValueError, TypeError):
        logger.warning("Configuration value '%s' is invalid. Using default value: %d", name, default)
        return default


def _bool_or_default(val: Any, default: bool, name: str) -> bool:
    """Accepts JSON booleans and the strings "true"/"false"; anything else falls back to a default."""
    if val is None:
        return default
    if isinstance(val, bool):
        return val
    if isinstance(val, str) and val.strip().lower() in ("true", "false"):
        return val.strip().lower() == "true"
    logger.warning("Configuration value '%s' is invalid. Using default value: %s", name, default)
    return default


def _resolve_config_path(config_path: Optional[Path]) -> Path:
    if config_path is not None:
        return Path(config_path)
    from_env = os.getenv(CONFIG_PATH_ENV)
    if from_env:
        return Path(from_env)
    return Path.cwd() / DEFAULT_CONFIG_FILE


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Builds the service settings from the JSON files and the environment."""
    path = _resolve_config_path(config_path)
    logger.info("Loading configuration from %s", path)
    data = _load_json_config(path, required=config_path is not None)

    environment = os.getenv("APP_ENV") or data.get("Environment") or "Production"
    overlay_path = path.with_name(f"{path.stem}.{environment}{path.suffix}")
    if overlay_path.exists():
        data = _merge(data, _load_json_config(overlay_path))
        logger.info("Applied %s overrides from %s", environment, overlay_path)

    connection_strings = data.get("ConnectionStrings") or {}
    logging_section = data.get("Logging") or {}

    settings = Settings(
        connection_string=os.getenv("MONGODB_CONNECTION_STRING") or connection_strings.get("MongoDb"),
        database_name=os.getenv("MONGODB_DATABASE_NAME") or data.get("DatabaseName"),
        environment=environment,
        port=_int_or_default(os.getenv("PORT") or data.get("Port"), 8000, "Port"),
        log_level=(os.getenv("LOG_LEVEL") or logging_section.get("LogLevel") or "INFO").upper(),
        log_dir=os.getenv("LOG_DIR") or logging_section.get("Directory"),
        server_selection_timeout_ms=_int_or_default(
            data.get("ServerSelectionTimeoutMs"), 5000, "ServerSelectionTimeoutMs"
        ),
        ping_on_startup=_bool_or_default(data.get("PingOnStartup"), False, "PingOnStartup"),
    )
    logger.info("Configuration loaded. Environment: %s, database: %s", settings.environment, settings.database_name)
    return settings
