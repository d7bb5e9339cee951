"""
Infrastructure layer - exceptions

Standard exception classes and error handling helpers.
"""

from typing import Any, Dict, Optional
from functools import wraps


class CalculatorException(Exception):
    """Base exception for the electrical calculator"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict payload"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigError(CalculatorException):
    """Configuration errors"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "CONFIG_ERROR", {"config_key": config_key, **kwargs})


class ValidationError(CalculatorException):
    """Invalid user input"""
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field, "value": value, **kwargs})


class CalculationError(CalculatorException):
    """No table entry satisfies the requested calculation"""
    def __init__(self, message: str, standard: Optional[str] = None, calculation: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "CALCULATION_ERROR", {"standard": standard, "calculation": calculation, **kwargs})


class PanelRenderError(CalculatorException):
    """A calculator panel failed while rendering"""
    def __init__(self, message: str, panel_id: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "PANEL_RENDER_ERROR", {"panel_id": panel_id, **kwargs})


# =============================================================================
# Error handling decorator
# =============================================================================

def handle_errors(logger=None):
    """
    Unified error handling decorator

    Args:
        logger: logger to use, defaults to this module's logger
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger
            if _logger is None:
                from .logging import get_logger
                _logger = get_logger(__name__)
            try:
                return func(*args, **kwargs)
            except CalculatorException as e:
                _logger.warning(f"business error [{e.error_code}]: {e.message}")
                raise
            except Exception as e:
                error = CalculationError(f"unexpected error: {str(e)}", calculation=func.__name__)
                _logger.error(f"unhandled exception in {func.__name__}: {str(e)}", exc_info=True)
                raise error from e
        return wrapper
    return decorator


class ErrorHandler:
    """Error handling helper for the UI layer"""

    def __init__(self, logger=None):
        if logger is None:
            from .logging import get_logger
            logger = get_logger(__name__)
        self.logger = logger

    def handle_and_log(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an error with optional context

        Args:
            error: the exception
            context: extra context for the log record
        """
        context = context or {}

        if isinstance(error, CalculatorException):
            self.logger.warning(f"business error [{error.error_code}]: {error.message} {context}")
        else:
            self.logger.error(f"system error: {str(error)} {context}", exc_info=error)

    def create_error_response(self, error: Exception) -> Dict[str, Any]:
        """
        Build an error response

        Args:
            error: the exception

        Returns:
            error response dict
        """
        if isinstance(error, CalculatorException):
            return {
                "success": False,
                "error": error.to_dict()
            }
        else:
            return {
                "success": False,
                "error": {
                    "error_code": "SYSTEM_ERROR",
                    "message": "Internal error",
                    "details": {"original_error": str(error)}
                }
            }
