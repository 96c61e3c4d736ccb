"""
flagscanner User Configuration

Hierarchical config system with global defaults + local overrides:
- Global: ~/.flagscanner/config.json (cross-project settings)
- Local: .flagscanner/config.json (project-specific overrides)

Config structure:
{
  "scanner": {
    "style": "gnu",         // Style preset providing defaults
    "prefixes": null,       // Explicit prefixes (null = use style)
    "separator": null       // Explicit separator (null = use style, "" = none)
  }
}
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional
from flagscanner.logging_config import logger


# Default configuration
DEFAULT_CONFIG = {
    "scanner": {
        "style": "gnu",
        "prefixes": None,
        "separator": None,
    }
}


class UserConfig:
    """
    Manages hierarchical user configuration.

    Load order (with override):
    1. Default config (hardcoded)
    2. Global config (~/.flagscanner/config.json)
    3. Local config (.flagscanner/config.json)
    """

    def __init__(self, project_root: Optional[Path] = None, home: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            project_root: Project root directory (defaults to CWD)
            home: Home directory holding the global config (defaults to ~)
        """
        self.project_root = project_root or Path.cwd()
        self.global_config_path = (home or Path.home()) / ".flagscanner" / "config.json"
        self.local_config_path = self.project_root / ".flagscanner" / "config.json"

        self._global: Dict[str, Any] = {}
        self._local: Dict[str, Any] = {}
        self._config = self._load_config()

    def _read_file(self, label: str, path: Path) -> Dict[str, Any]:
        """
        Read one config file; missing or unreadable files count as empty.
        """
        if not path.exists():
            return {}
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load {label} config: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {label} config at {path}: top level must be an object")
            return {}
        logger.debug(f"Loaded {label} config from {path}")
        return data

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration with hierarchical override.

        Returns:
            Merged configuration dictionary
        """
        self._global = self._read_file("global", self.global_config_path)
        self._local = self._read_file("local", self.local_config_path)
        return self._merged()

    def _merged(self) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)
        config = self._deep_merge(config, copy.deepcopy(self._global))
        return self._deep_merge(config, copy.deepcopy(self._local))

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries, with override taking precedence.
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by dot-separated key.

        Example:
            config.get("scanner.style")  # -> "gnu"
        """
        value: Any = self._config
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a local config value by dot-separated key (in memory, see ``save``).

        Only the local layer changes; defaults and global values are not
        copied into it.
        """
        parts = key.split(".")
        target = self._local
        for part in parts[:-1]:
            if not isinstance(target.get(part), dict):
                target[part] = {}
            target = target[part]
        target[parts[-1]] = value
        self._config = self._merged()

    def save(self) -> Path:
        """
        Write the local overrides to the local config file and reload.

        Returns:
            Path of the written file
        """
        self.local_config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.local_config_path, 'w') as f:
            json.dump(self._local, f, indent=2)
        logger.info(f"Saved local config to {self.local_config_path}")
        self._config = self._load_config()
        return self.local_config_path

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)


# Module-level cache, mirrors the singleton used by the CLI
_user_config: Optional[UserConfig] = None


def get_user_config() -> UserConfig:
    """
    Return the process-wide UserConfig for the current directory, loading it on first use.
    """
    global _user_config
    if _user_config is None:
        _user_config = UserConfig()
    return _user_config


def reset_user_config() -> None:
    """Drop the cached config (used by tests)."""
    global _user_config
    _user_config = None
