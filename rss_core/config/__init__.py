"""
Configuration Management
========================

Configuration for parsing, rendering and validating RSS documents.
"""

from rss_core.config.settings import (
    CoreConfig,
    ParserConfig,
    RenderConfig,
    ValidationConfig,
    configure_logging,
    get_default_config,
    load_config,
    save_config,
)

__all__ = [
    "CoreConfig",
    "ParserConfig",
    "RenderConfig",
    "ValidationConfig",
    "configure_logging",
    "get_default_config",
    "load_config",
    "save_config",
]
