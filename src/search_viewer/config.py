"""Configuration loading: server origin and link-opening preferences."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from platformdirs import user_config_dir

from search_viewer.models import CONFIG_APP_NAME, DEFAULT_SERVER_URL

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration
# ============================================================================
#
# The config file is read-only from the app's point of view; session data
# lives on the server and nothing is written back here.
#
#   Field            Rule                                  Handler
#   ───────────────  ────────────────────────────────────  ──────────────────────
#   server_url       http(s) origin, no path/query         normalize_server_url
#   open_in_browser  bool                                  _safe_get
#
CONFIG_FILENAME = "config.json"


@dataclass(slots=True)
class UserConfig:
    """User settings for the viewer."""

    server_url: str = DEFAULT_SERVER_URL
    open_in_browser: bool = True


def get_config_path() -> Path:
    """Get the path to the configuration file.

    Uses platformdirs for cross-platform config directory:
    - Linux: ~/.config/search-viewer/config.json
    - macOS: ~/Library/Application Support/search-viewer/config.json
    - Windows: %APPDATA%/search-viewer/config.json
    """
    config_dir = Path(user_config_dir(CONFIG_APP_NAME))
    return config_dir / CONFIG_FILENAME


def normalize_server_url(value: str) -> str:
    """Validate a server origin and strip any trailing slash.

    Raises:
        ValueError: If the value is not an http(s) URL with a host, or
            carries a path, query, or fragment.
    """
    candidate = value.strip()
    parts = urlsplit(candidate)
    if parts.scheme not in ("http", "https"):
        raise ValueError(f"server URL must start with http:// or https:// (got {value!r})")
    if not parts.hostname:
        raise ValueError(f"server URL has no host (got {value!r})")
    if parts.path not in ("", "/") or parts.query or parts.fragment:
        raise ValueError(f"server URL must be an origin without a path (got {value!r})")
    return f"{parts.scheme}://{parts.netloc}"


def _safe_get(data: dict, key: str, default: Any, expected_type: type) -> Any:
    """Safely get a value from dict with type validation.

    Returns the default if key is missing or value has wrong type.
    """
    value = data.get(key, default)
    if not isinstance(value, expected_type):
        return default
    return value


def _dict_to_config(data: dict[str, Any]) -> UserConfig:
    """Deserialize a dictionary to UserConfig with type validation."""
    server_url = _safe_get(data, "server_url", DEFAULT_SERVER_URL, str)
    try:
        server_url = normalize_server_url(server_url)
    except ValueError as e:
        logger.warning("Ignoring invalid server_url in config: %s", e)
        server_url = DEFAULT_SERVER_URL
    return UserConfig(
        server_url=server_url,
        open_in_browser=_safe_get(data, "open_in_browser", True, bool),
    )


def load_config(path: Path | None = None) -> UserConfig:
    """Load configuration from disk.

    Returns default config if file doesn't exist or is corrupted.
    Logs specific errors to help diagnose config issues.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return UserConfig()

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning("Config file has invalid JSON, using defaults: %s", e)
        return UserConfig()
    except OSError as e:
        logger.warning("Could not read config file, using defaults: %s", e)
        return UserConfig()

    if not isinstance(data, dict):
        logger.warning("Config file has invalid structure, using defaults")
        return UserConfig()
    return _dict_to_config(data)


__all__ = [
    "CONFIG_FILENAME",
    "UserConfig",
    "get_config_path",
    "load_config",
    "normalize_server_url",
]
