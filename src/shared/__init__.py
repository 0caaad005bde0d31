"""
Shared module - Cross-cutting concerns

Constants, enums and logging helpers used by every layer of the SPI
forecast service. Nothing in here may depend on Infrastructure or on
the web framework.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
