"""
Configuration Management
========================

This module provides TOML-based configuration file support for the kp CLI.

Configuration files are merged in the following order (lowest to highest priority):
1. Built-in defaults
2. /etc/kyopro/config.toml (system config)
3. ~/.config/kyopro/config.toml (user config)
4. ./kyopro.toml (current directory)
5. Path specified via the --config option

Example configuration file (kyopro.toml):

    [contest]
    prefix = "abc"
    template = "rust"
    url_base = "https://atcoder.jp/contests"
    source_file = "main.rs"

    [tools]
    acc = "npx atcoder-cli"
    oj = "oj"
    install_expand = true

    [tests]
    directory = "tests"
    default_sample = "1"

    [display]
    color = "true"

    [logging]
    level = "WARNING"
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

# Use tomli for Python < 3.11, tomllib for Python >= 3.11
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


DEFAULT_CONFIG: Dict[str, Any] = {
    "contest": {
        "prefix": "abc",
        "template": "rust",
        "url_base": "https://atcoder.jp/contests",
        "source_file": "main.rs",
    },
    "tools": {
        "acc": "npx atcoder-cli",
        "oj": "oj",
        "install_expand": True,
    },
    "tests": {
        "directory": "tests",
        "default_sample": "1",
    },
    "display": {
        "color": "true",  # "false", "16", "256", "true"
    },
    "logging": {
        "level": "WARNING",
    },
}

# Standard config file locations, highest priority first
CONFIG_LOCATIONS = [
    Path("kyopro.toml"),
    Path("~/.config/kyopro/config.toml").expanduser(),
    Path("/etc/kyopro/config.toml"),
]

SECTIONS = ("contest", "tools", "tests", "display", "logging")


@dataclass
class Config:
    """
    Configuration container for kyopro settings.

    Attributes:
        contest: Contest naming, acc template and task URL settings
        tools: Command strings for acc and oj
        tests: Sample test directory layout
        display: Terminal colour settings
        logging: Logging settings
        _source: Path to the config file that was loaded
    """

    contest: Dict[str, Any] = field(default_factory=dict)
    tools: Dict[str, Any] = field(default_factory=dict)
    tests: Dict[str, Any] = field(default_factory=dict)
    display: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)
    _source: Optional[str] = None

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        section_dict = getattr(self, section, {})
        if not isinstance(section_dict, dict):
            return default
        return section_dict.get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value."""
        section_dict = getattr(self, section, None)
        if isinstance(section_dict, dict):
            section_dict[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {name: getattr(self, name) for name in SECTIONS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "Config":
        """Create Config from dictionary."""
        return cls(
            contest=data.get("contest", {}),
            tools=data.get("tools", {}),
            tests=data.get("tests", {}),
            display=data.get("display", {}),
            logging=data.get("logging", {}),
            _source=source,
        )


def load_toml(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a TOML configuration file.

    Args:
        filepath: Path to the TOML file

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If file doesn't exist
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    with path.open("rb") as f:
        return tomllib.load(f)


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(v) for v in value) + "]"
    return str(value)


def save_toml(config: Dict[str, Any], filepath: Union[str, Path]) -> str:
    """
    Save configuration to a TOML file.

    Args:
        config: Configuration dictionary
        filepath: Path to save the file

    Returns:
        Path to the saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = []
    for section, values in config.items():
        if isinstance(values, dict) and values:
            lines.append(f"[{section}]")
            for key, value in values.items():
                lines.append(f"{key} = {_format_value(value)}")
            lines.append("")

    path.write_text("\n".join(lines), encoding="utf-8")
    return str(path)


def find_config_file(config_path: Optional[str] = None) -> Optional[Path]:
    """
    Find the configuration file to use.

    Args:
        config_path: Explicit path to config file (highest priority)

    Returns:
        Path to config file, or None if not found
    """
    if config_path:
        path = Path(config_path)
        if path.exists():
            return path
        logger.warning(f"Specified config file not found: {config_path}")
        return None

    for location in CONFIG_LOCATIONS:
        if location.exists():
            return location

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a single file merged over the defaults.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Config object with merged settings
    """
    config_data = _deep_copy_dict(DEFAULT_CONFIG)

    config_file = find_config_file(config_path)

    if config_file:
        try:
            file_config = load_toml(config_file)
            file_config = _drop_invalid_sections(file_config, config_file)
            config_data = _merge_dicts(config_data, file_config)
            logger.info(f"Loaded configuration from {config_file}")
            return Config.from_dict(config_data, source=str(config_file))
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Error loading config file {config_file}: {e}")

    return Config.from_dict(config_data)


def get_default_config() -> Config:
    """Get the default configuration."""
    return Config.from_dict(_deep_copy_dict(DEFAULT_CONFIG))


def create_default_config_file(filepath: Optional[str] = None) -> str:
    """
    Create a default configuration file.

    Args:
        filepath: Path to create the file (default: ./kyopro.toml)

    Returns:
        Path to the created file
    """
    if filepath is None:
        filepath = "kyopro.toml"

    return save_toml(DEFAULT_CONFIG, filepath)


def _deep_copy_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    """Create a deep copy of a dictionary."""
    result = {}
    for key, value in d.items():
        if isinstance(value, dict):
            result[key] = _deep_copy_dict(value)
        elif isinstance(value, list):
            result[key] = value.copy()
        else:
            result[key] = value
    return result


def _drop_invalid_sections(
    file_config: Dict[str, Any], location: Union[str, Path]
) -> Dict[str, Any]:
    """Remove known sections that are not tables, warning about each one."""
    result = {}
    for key, value in file_config.items():
        if key in SECTIONS and not isinstance(value, dict):
            logger.warning(
                f"Ignoring [{key}] in {location}: expected a table, got {type(value).__name__}"
            )
            continue
        result[key] = value
    return result


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two dictionaries, with override taking precedence."""
    result = _deep_copy_dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


# Global configuration instance
_global_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = load_config_cascade()
    return _global_config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Reset the global configuration to None (will reload on next access)."""
    global _global_config
    _global_config = None


def get_config_locations() -> List[Path]:
    """
    Get configuration file search locations in priority order.

    Returns:
        List of paths to search, in priority order (highest first)
    """
    return CONFIG_LOCATIONS.copy()


def load_config_cascade(explicit_path: Optional[str] = None) -> Config:
    """
    Load configuration with full cascade support.

    Merges configs from all levels in priority order:
    defaults -> system -> user -> current dir -> explicit

    Args:
        explicit_path: Explicit config file path (highest priority)

    Returns:
        Config object with merged settings from all sources
    """
    config_data = _deep_copy_dict(DEFAULT_CONFIG)
    source = None

    paths = list(reversed(get_config_locations()))
    if explicit_path:
        explicit = Path(explicit_path)
        if explicit.exists():
            paths.append(explicit)
        else:
            logger.warning(f"Specified config file not found: {explicit_path}")

    for location in paths:
        if not location.exists():
            continue
        try:
            file_config = load_toml(location)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Error loading {location}: {e}")
            continue
        config_data = _merge_dicts(config_data, _drop_invalid_sections(file_config, location))
        source = str(location)
        logger.debug(f"Merged configuration from {location}")

    return Config.from_dict(config_data, source=source)
