"""
Configuration management for bdscan.

Handles loading, merging, and discovery of configuration files, and resolves
the Black Duck credentials from the environment.
"""
import importlib.resources as importlib_resources
import logging
import os
from typing import Optional

import yaml

from bdscan.models import HubCredentials

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BDSCAN_CONFIG"
LOCAL_CONFIG_FILE = "bdscan.config.yaml"

# Checked in order, first non-empty value wins
URL_ENV_VARS = ("BLACKDUCK_URL", "hubURL")
TOKEN_ENV_VARS = ("BLACKDUCK_API_TOKEN", "hubToken")


class ConfigManager:
    """Manages bdscan configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config shipped with the package."""
        import bdscan.config
        default_config_path = importlib_resources.files(bdscan.config) / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self) -> dict:
        """Discover config file with priority order."""

        # Priority 1: BDSCAN_CONFIG environment variable
        config_path = os.getenv(CONFIG_ENV_VAR)
        if config_path:
            if os.path.exists(config_path):
                logger.debug("Loading configuration from %s", config_path)
                return self.load_and_merge_config(config_path)
            else:
                raise FileNotFoundError(f"Config file not found: {config_path}")

        # Priority 2: bdscan.config.yaml in current directory
        if os.path.exists(LOCAL_CONFIG_FILE):
            logger.debug("Loading configuration from %s", LOCAL_CONFIG_FILE)
            return self.load_and_merge_config(LOCAL_CONFIG_FILE)

        # Priority 3: Package default config
        return self.load_package_default_config()

    @staticmethod
    def _first_env(names) -> Optional[str]:
        for name in names:
            value = os.getenv(name)
            if value:
                return value
        return None

    def resolve_credentials(self, config: dict) -> HubCredentials:
        """Environment variables override the ``blackduck`` config section."""
        section = config.get("blackduck") or {}
        url = self._first_env(URL_ENV_VARS) or section.get("url") or ""
        api_token = self._first_env(TOKEN_ENV_VARS) or section.get("api_token") or ""
        return HubCredentials(url=url, api_token=api_token)
