"""
Configuration for the Clickatell client.

Credentials live in a JSON file:

    {
        "user": "myuser",
        "password": "secret",
        "api_id": "3412345",
        "from": "27721234567",
        "timeout": 30
    }
"""

import json
import os
from typing import Any, Dict, Optional

from .exceptions import ConfigError

REQUIRED_FIELDS = ['user', 'password', 'api_id']
DEFAULT_TIMEOUT = 30


def get_default_config_dir() -> str:
    """Get the default configuration directory following XDG standards"""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return os.path.join(xdg_config_home, "clickatell")

    home = os.environ.get("HOME")
    if home:
        return os.path.join(home, ".config", "clickatell")

    # Last resort: current directory
    return os.path.join(os.getcwd(), ".config", "clickatell")


def get_default_config_path() -> str:
    """Config path from CLICKATELL_CONFIG, else the XDG default"""
    return os.environ.get("CLICKATELL_CONFIG") or os.path.join(
        get_default_config_dir(), "config.json"
    )


class ClickatellConfig:
    """Credentials and settings for the Clickatell HTTP API"""

    def __init__(self, config_path: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        self.config_path = config_path
        self.user: str = ""
        self.password: str = ""
        self.api_id: str = ""
        self.sender: Optional[str] = None
        self.timeout: float = DEFAULT_TIMEOUT

        if data is None:
            if self.config_path is None:
                self.config_path = get_default_config_path()
            data = self._read_file()

        self._apply(data)

    def _read_file(self) -> Dict[str, Any]:
        """Load configuration from file"""
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in config file {self.config_path}: {e}")

    def _apply(self, config_data: Dict[str, Any]):
        if not isinstance(config_data, dict):
            raise ConfigError(f"Config must be a JSON object, got {type(config_data).__name__}")

        for field in REQUIRED_FIELDS:
            if not config_data.get(field):
                raise ConfigError(f"Missing required config field: {field}")
            setattr(self, field, str(config_data[field]))

        # Optional fields
        self.sender = config_data.get('from')

        timeout = config_data.get('timeout', DEFAULT_TIMEOUT)
        try:
            self.timeout = float(timeout)
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid timeout: {timeout!r}")
        if self.timeout <= 0:
            raise ConfigError("timeout must be positive")

    def credentials(self) -> Dict[str, str]:
        """Query parameters that authenticate every call"""
        return {"user": self.user, "password": self.password, "api_id": self.api_id}
