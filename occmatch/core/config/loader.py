"""Configuration loader with multi-level hierarchy."""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "OCCMATCH_"
ENV_NESTING = "__"


class ConfigLoader:
    """Load and merge configuration from multiple sources.

    Hierarchy (later overrides earlier):
    1. Default config (config/default.yaml)
    2. Environment config (config/environments/{env}.yaml)
    3. Programmatic overrides [optional]
    4. Environment variables (OCCMATCH_*, nested keys split on "__")
    """

    def __init__(self, config_dir: Path | str | None = None):
        """Initialize config loader.

        Args:
            config_dir: Configuration directory (defaults to ./config)
        """
        if config_dir is None:
            config_dir = os.getenv("OCCMATCH_CONFIG_DIR") or (
                Path(__file__).parent.parent.parent.parent / "config"
            )
        self.config_dir = Path(config_dir)

    def load(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """Load configuration with full hierarchy.

        Args:
            overrides: Configuration dict provided programmatically

        Returns:
            Merged configuration dictionary
        """
        config = self._load_yaml(self.config_dir / "default.yaml")

        env = os.getenv("OCCMATCH_ENV", "development")
        env_config_path = self.config_dir / f"environments/{env}.yaml"
        if env_config_path.exists():
            config = self._deep_merge(config, self._load_yaml(env_config_path))

        if overrides:
            config = self._deep_merge(config, overrides)

        return self._apply_env_overrides(config)

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Parsed YAML as dictionary (empty when the file is missing)
        """
        if not path.exists():
            return {}

        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
            return content if content else {}

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary
            override: Override dictionary

        Returns:
            Merged dictionary (base is not modified)
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Override config with environment variables.

        Example: OCCMATCH_SEARCH__DEFAULT_LIMIT=5 overrides
        config["search"]["default_limit"].

        Args:
            config: Configuration dictionary

        Returns:
            Config with environment variable overrides
        """
        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX) or ENV_NESTING not in key:
                continue
            path = key[len(ENV_PREFIX):].lower().split(ENV_NESTING)
            if all(path):
                self._set_nested(config, path, value)

        return config

    def _set_nested(self, config: dict[str, Any], path: list[str], value: str) -> None:
        """Set nested configuration value.

        Args:
            config: Configuration dictionary
            path: Path to nested key (e.g., ["search", "default_limit"])
            value: Value to set
        """
        current = config
        for key in path[:-1]:
            if key not in current or current[key] is None:
                current[key] = {}
            elif not isinstance(current[key], dict):
                # Can't traverse non-dict
                return
            current = current[key]

        current[path[-1]] = self._convert_value(value)

    def _convert_value(self, value: str) -> Any:
        """Convert string value to appropriate type.

        Args:
            value: String value from environment variable

        Returns:
            Converted value (bool, int, float, None or str)
        """
        lowered = value.lower()
        if lowered in ("true", "yes"):
            return True
        if lowered in ("false", "no"):
            return False
        if lowered in ("null", "none", ""):
            return None

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value


# Global config loader instance
_config_loader: ConfigLoader | None = None


def get_config_loader() -> ConfigLoader:
    """Get global configuration loader instance.

    Returns:
        ConfigLoader: Global config loader
    """
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def load_config(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Load configuration (convenience function).

    Args:
        overrides: Configuration provided programmatically

    Returns:
        Merged configuration dictionary
    """
    return get_config_loader().load(overrides=overrides)


def get_config_value(config: dict[str, Any], path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'search.default_limit'."""
    current: Any = config
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return default if current is None else current
