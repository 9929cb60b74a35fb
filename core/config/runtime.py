"""
Runtime Configuration

Central configuration for the comment client: target URL, default request
headers, response decoding and local resource lookup.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Environment variable prefix
ENV_PREFIX = "COMMENT_"

# Older test harnesses export the target URL under this name
LEGACY_URL_ENV = "UrlForTesting"

DEFAULT_CONFIG_PATHS = (
    Path("comment_client.json"),
    Path(".comment_client.json"),
    Path.home() / ".config" / "comment_client" / "config.json",
)


def _default_headers() -> dict[str, str]:
    return {"Content-Type": "application/json"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    """
    Complete client configuration.

    Can be loaded from:
    - Environment variables (and a .env file)
    - JSON file
    - Programmatic construction
    """
    base_url: Optional[str] = None
    default_headers: dict[str, str] = field(default_factory=_default_headers)
    decode_responses: bool = True
    use_include_path: bool = False
    include_path: list[str] = field(default_factory=list)
    log_level: str = "INFO"

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - COMMENT_API_URL: Base URL of the comment API (falls back to UrlForTesting)
        - COMMENT_DECODE_RESPONSES: Decode JSON response bodies (true/false)
        - COMMENT_USE_INCLUDE_PATH: Search include path for local resources (true/false)
        - COMMENT_INCLUDE_PATH: os.pathsep-separated include directories
        - COMMENT_LOG_LEVEL: Log level
        """
        overrides: dict[str, Any] = {}

        base_url = os.getenv(f"{ENV_PREFIX}API_URL") or os.getenv(LEGACY_URL_ENV)
        if base_url:
            overrides["base_url"] = base_url
        if os.getenv(f"{ENV_PREFIX}DECODE_RESPONSES"):
            overrides["decode_responses"] = _env_bool(f"{ENV_PREFIX}DECODE_RESPONSES", True)
        if os.getenv(f"{ENV_PREFIX}USE_INCLUDE_PATH"):
            overrides["use_include_path"] = _env_bool(f"{ENV_PREFIX}USE_INCLUDE_PATH", False)
        if os.getenv(f"{ENV_PREFIX}INCLUDE_PATH"):
            overrides["include_path"] = [
                p for p in os.getenv(f"{ENV_PREFIX}INCLUDE_PATH", "").split(os.pathsep) if p
            ]
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration purely from environment variables."""
        return cls().with_env_overrides()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientConfig":
        """Load configuration from a dictionary (supports partial data)."""
        config = cls()
        if data.get("base_url"):
            config.base_url = data["base_url"]
        if isinstance(data.get("default_headers"), dict):
            config.default_headers = {
                str(k): str(v) for k, v in data["default_headers"].items()
            }
        config.decode_responses = bool(data.get("decode_responses", config.decode_responses))
        config.use_include_path = bool(data.get("use_include_path", config.use_include_path))
        include_path = data.get("include_path", config.include_path)
        if isinstance(include_path, str):
            include_path = [p for p in include_path.split(os.pathsep) if p]
        config.include_path = list(include_path)
        config.log_level = data.get("log_level") or config.log_level
        return config

    @classmethod
    def from_file(cls, path: str | Path) -> "ClientConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    def with_env_overrides(self) -> "ClientConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_config, key, value)
        return new_config

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_config(config_path: Path | None = None) -> ClientConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file; when omitted the default
            locations are searched and the first one found is used.

    Returns:
        Merged configuration
    """
    config: ClientConfig | None = None

    if config_path is not None:
        config = ClientConfig.from_file(config_path)
    else:
        for path in DEFAULT_CONFIG_PATHS:
            if path.exists():
                try:
                    config = ClientConfig.from_file(path)
                    logger.info(f"Loaded config from {path}")
                    break
                except (OSError, ValueError) as e:
                    logger.warning(f"Failed to parse {path}: {e}")

    if config is None:
        config = ClientConfig()

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """{
  "base_url": "http://localhost:8000/",
  "default_headers": {
    "Content-Type": "application/json"
  },
  "decode_responses": true,
  "use_include_path": false,
  "include_path": [],
  "log_level": "INFO"
}
"""
