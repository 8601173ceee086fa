"""
Configuration Manager for the Wobot backend and dashboard.

This module provides a centralized way to manage configuration settings
using YAML files. Values can be overridden from the environment so the
same file works locally and inside containers.
"""

import yaml
import os
from pathlib import Path
from typing import Dict, Any, Optional

DEFAULT_CONFIG_PATH = "config.yaml"

class ConfigManager:
    """Loads configuration from a YAML file with environment overrides."""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH, environ: Optional[Dict[str, str]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the YAML configuration file
            environ: Environment mapping used for overrides (defaults to os.environ)
        """
        self.config_path = Path(config_path)
        self.environ = os.environ if environ is None else environ
        self._config = {}
        self.load()

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Returns:
            Dictionary containing configuration settings
        """
        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                self._config = yaml.safe_load(f) or {}
        else:
            self._config = {}
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'server.port' or 'dashboard.backend_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def _resolve(self, env_var: Optional[str], key: str, default: Any) -> Any:
        """Environment first, then the YAML file, then the default."""
        if env_var and self.environ.get(env_var):
            return self.environ[env_var]
        return self.get(key, default)

    # Convenience methods for common config access patterns
    @property
    def port(self) -> int:
        """Port the API server listens on."""
        return int(self._resolve('PORT', 'server.port', 3001))

    @property
    def host(self) -> str:
        """Interface the API server binds to (all interfaces by default)."""
        return str(self._resolve('HOST', 'server.host', '0.0.0.0'))

    @property
    def environment(self) -> str:
        """Runtime environment label reported by /api/v1/status."""
        return str(self._resolve('ENVIRONMENT', 'server.environment', 'development'))

    @property
    def backend_url(self) -> str:
        """Base URL the dashboard uses to reach the API."""
        return str(self._resolve('BACKEND_URL', 'dashboard.backend_url', 'http://localhost:3001')).rstrip('/')

    @property
    def request_timeout(self) -> Optional[float]:
        """Dashboard request timeout in seconds; None waits forever."""
        timeout = self.get('dashboard.request_timeout')
        return None if timeout is None else float(timeout)

    @property
    def log_dir(self) -> str:
        return str(self._resolve('LOG_DIR', 'logging.dir', os.path.join('output', 'logs')))

    @property
    def log_level(self) -> str:
        return str(self._resolve('LOG_LEVEL', 'logging.level', 'INFO')).upper()

# Global configuration manager instance
config_manager = ConfigManager(os.environ.get('WOBOT_CONFIG', DEFAULT_CONFIG_PATH))

def get_config() -> ConfigManager:
    """
    Get the global configuration manager instance.

    Returns:
        Global ConfigManager instance
    """
    return config_manager
