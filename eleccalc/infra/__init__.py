"""Infrastructure layer: logging, exceptions, configuration."""

from .exceptions import (
    CalculatorException,
    ConfigError,
    ValidationError,
    CalculationError,
    PanelRenderError,
    handle_errors,
    ErrorHandler,
)
from .logging import LoggerManager, configure_logging, get_logger, set_log_level
from .config import AppSettings, ConfigManager, get_config_manager

__all__ = [
    "CalculatorException",
    "ConfigError",
    "ValidationError",
    "CalculationError",
    "PanelRenderError",
    "handle_errors",
    "ErrorHandler",
    "LoggerManager",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "AppSettings",
    "ConfigManager",
    "get_config_manager",
]
