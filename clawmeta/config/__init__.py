"""Configuration for clawmeta."""

from clawmeta.config.loader import YAMLConfigLoader, load_config
from clawmeta.config.models import BooleanConfig, ClawmetaConfig, LoggingConfig, MetadataConfig
from clawmeta.errors import ConfigLoadError, ConfigValidationError

__all__ = [
    "BooleanConfig",
    "ClawmetaConfig",
    "ConfigLoadError",
    "ConfigValidationError",
    "LoggingConfig",
    "MetadataConfig",
    "YAMLConfigLoader",
    "load_config",
]
