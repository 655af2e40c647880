"""
Configuration management for blocktree.

Settings come from config.yaml, layered over DEFAULT_CONFIG so that a file
only needs the values it changes. They control logging, how image sources
are rewritten and how the command line tool writes its output.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
    "paths": {
        "log_file": "blocktree.log",
    },
    "images": {
        "proxy_base": "https://www.notion.so/image/",
        "passthrough_prefixes": ["data:", "https://images.unsplash.com"],
    },
    "output": {
        "indent": 2,
    },
}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """
    Layered YAML configuration with dot-path lookup.
    """

    def __init__(self, config_path: str = "config.yaml"):
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self.reload()

    def reload(self) -> None:
        """(Re)read the file; on any read or parse failure use the defaults alone."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise yaml.YAMLError(f"top level must be a mapping, got {type(loaded).__name__}")
        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration from {self.config_path}, using defaults: {e}")
            loaded = {}
        else:
            logging.info(f"Configuration loaded from {self.config_path}")

        self._config = _merge(DEFAULT_CONFIG, loaded)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a value by dot-separated path, e.g. ``config.get("images.proxy_base")``.
        """
        value: Any = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        return self._config.get(section, {})

    @property
    def image_proxy_base(self) -> str:
        return self.get("images.proxy_base")

    @property
    def image_passthrough_prefixes(self) -> List[str]:
        return self.get("images.passthrough_prefixes")

    @property
    def log_filename(self) -> str:
        return self.get("paths.log_file")

    @property
    def output_indent(self) -> int:
        return self.get("output.indent")


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    return config
