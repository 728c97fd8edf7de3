"""
Configuration for the Meterus SDK.
"""

from meterus.config.settings import (
    DEFAULT_ADDRESS,
    LoggingConfig,
    MeterusConfig,
    load_config,
)

__all__ = ["DEFAULT_ADDRESS", "LoggingConfig", "MeterusConfig", "load_config"]
