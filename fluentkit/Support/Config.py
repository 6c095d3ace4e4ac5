from __future__ import annotations

from typing import Any, Dict, List
import os
import json
import importlib
import logging
import pkgutil
from types import ModuleType


class ConfigRepository:
    """Laravel-style configuration repository backed by the ``fluentkit.config`` package."""

    def __init__(self, package: str = "fluentkit.config") -> None:
        self._package = package
        self._config: Dict[str, Any] = {}
        self._cached: Dict[str, Any] = {}
        self.logger = logging.getLogger(f"fluent.{self.__class__.__name__}")
        self._load_config()

    def _load_config(self, reload_modules: bool = False) -> None:
        """Load every module of the configuration package."""
        try:
            package = importlib.import_module(self._package)
        except ModuleNotFoundError:
            self.logger.debug(f"Configuration package '{self._package}' not found, using defaults")
            return

        for module_info in pkgutil.iter_modules(getattr(package, '__path__', [])):
            if module_info.name.startswith('_'):
                continue

            module = importlib.import_module(f"{self._package}.{module_info.name}")
            if reload_modules:
                module = importlib.reload(module)
            self._config[module_info.name] = self._module_values(module)

    def _module_values(self, module: ModuleType) -> Dict[str, Any]:
        """Get all public, non-callable values of a config module."""
        return {
            key: value for key, value in module.__dict__.items()
            if not key.startswith('_')
            and not callable(value)
            and not isinstance(value, ModuleType)
            and type(value).__module__ != '__future__'
        }

    def _convert_env_value(self, value: str) -> Any:
        """Convert environment variable string to appropriate type."""
        # Boolean values
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        # None/null values
        if value.lower() in ('null', 'none', ''):
            return None

        # Numeric values
        try:
            if '.' in value:
                return float(value)
            else:
                return int(value)
        except ValueError:
            pass

        # JSON values
        if value.startswith(('{', '[')):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation."""
        if key in self._cached:
            return self._cached[key]

        value: Any = self._config

        for k in key.split('.'):
            if not isinstance(value, dict):
                return default
            try:
                value = value[k]
            except KeyError:
                return default

        self._cached[key] = value

        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value using dot notation."""
        keys = key.split('.')
        config = self._config

        # Navigate to the parent
        for k in keys[:-1]:
            if k not in config or not isinstance(config[k], dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

        self._clear_cache(key)

    def has(self, key: str) -> bool:
        """Check if a configuration key exists."""
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def all(self) -> Dict[str, Any]:
        """Get all configuration."""
        return self._config.copy()

    def get_many(self, keys: List[str]) -> Dict[str, Any]:
        """Get multiple configuration values at once."""
        return {key: self.get(key) for key in keys}

    def _clear_cache(self, key: str) -> None:
        """Clear cache entries overlapping the given key."""
        keys_to_remove = [
            k for k in self._cached.keys()
            if k == key or k.startswith(f"{key}.") or key.startswith(f"{k}.")
        ]
        for k in keys_to_remove:
            del self._cached[k]

    def flush(self) -> None:
        """Flush all cached configuration."""
        self._cached.clear()

    def reload(self) -> None:
        """Reload all configuration, re-reading the environment."""
        self._config.clear()
        self._cached.clear()

        # Config modules read os.environ at import time
        self._load_config(reload_modules=True)


# Global config instance
config = ConfigRepository()


def env(key: str, default: Any = None) -> Any:
    """Get environment variable with type conversion."""
    value = os.getenv(key)
    if value is None:
        return default

    return config._convert_env_value(value)
