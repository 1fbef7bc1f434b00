"""
Configuration Settings
======================

Configuration dataclasses for parsing, rendering and validating feeds.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Union
import json
import logging

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ParserConfig:
    """XML parsing configuration."""

    ignore_namespaces: bool = False  # match namespaced tags on local name
    remove_comments: bool = True
    huge_tree: bool = False


@dataclass
class RenderConfig:
    """XML rendering configuration."""

    xml_declaration: bool = True
    encoding: str = "UTF-8"
    pretty_print: bool = False


@dataclass
class ValidationConfig:
    """Validation configuration."""

    validate_day_names: bool = False  # check <day> against Monday..Sunday
    log_violations: bool = False


@dataclass
class CoreConfig:
    """
    Complete library configuration.

    Example:
        config = CoreConfig()
        config.render.pretty_print = True
        config.validation.validate_day_names = True
        save_config(config, Path("rss_core.yaml"))
    """

    parser: ParserConfig = field(default_factory=ParserConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    log_level: str = "INFO"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'parser': asdict(self.parser),
            'render': asdict(self.render),
            'validation': asdict(self.validation),
            'log_level': self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CoreConfig':
        """Create from dictionary."""
        config = cls()

        if 'parser' in data:
            config.parser = ParserConfig(**data['parser'])
        if 'render' in data:
            config.render = RenderConfig(**data['render'])
        if 'validation' in data:
            config.validation = ValidationConfig(**data['validation'])

        if 'log_level' in data:
            config.log_level = data['log_level']

        return config


def load_config(config_path: Path) -> CoreConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config_path: Path to config file

    Returns:
        CoreConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Loaded configuration from {config_path}")
    return CoreConfig.from_dict(data or {})


def save_config(config: CoreConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config: CoreConfig to save
        config_path: Path to save config file

    Raises:
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()
    data = config.to_dict()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        elif suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> CoreConfig:
    """Get default configuration."""
    return CoreConfig()


def configure_logging(level: Union[str, int, None] = None,
                      config: Optional[CoreConfig] = None) -> None:
    """
    Apply a log level to the rss_core logger hierarchy.

    The library installs no handlers; applications that want output call
    logging.basicConfig (or their own setup) as usual.

    Args:
        level: Level name or number; defaults to config.log_level
        config: Configuration providing log_level when level is omitted
    """
    if level is None:
        level = (config or get_default_config()).log_level
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger("rss_core").setLevel(level)
    logger.debug(f"rss_core log level set to {level}")
