"""
Unit tests: exception hierarchy and error handling helpers
"""
import logging

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eleccalc.infra.exceptions import (
    CalculationError,
    CalculatorException,
    ConfigError,
    ErrorHandler,
    PanelRenderError,
    ValidationError,
    handle_errors,
)


class TestExceptions:

    def test_error_codes(self):
        assert ConfigError("x").error_code == "CONFIG_ERROR"
        assert ValidationError("x").error_code == "VALIDATION_ERROR"
        assert CalculationError("x").error_code == "CALCULATION_ERROR"
        assert PanelRenderError("x").error_code == "PANEL_RENDER_ERROR"
        assert CalculatorException("x").error_code == "UNKNOWN_ERROR"

    def test_to_dict(self):
        err = ValidationError("bad current", field="load_current", value=-1)
        assert err.to_dict() == {
            "error_code": "VALIDATION_ERROR",
            "message": "bad current",
            "details": {"field": "load_current", "value": -1},
        }

    def test_subclasses(self):
        for cls in (ConfigError, ValidationError, CalculationError, PanelRenderError):
            assert issubclass(cls, CalculatorException)


class TestHandleErrors:

    def test_business_error_passes_through(self):
        @handle_errors(logging.getLogger("test"))
        def fn():
            raise ValidationError("nope", field="x")

        with pytest.raises(ValidationError):
            fn()

    def test_unknown_error_wrapped(self):
        @handle_errors(logging.getLogger("test"))
        def compute():
            raise ZeroDivisionError("division by zero")

        with pytest.raises(CalculationError) as exc_info:
            compute()
        assert exc_info.value.details["calculation"] == "compute"
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)

    def test_return_value(self):
        @handle_errors()
        def ok():
            return 42

        assert ok() == 42


class TestErrorHandler:

    def test_business_error_response(self):
        response = ErrorHandler().create_error_response(CalculationError("no fit", standard="NEC"))
        assert response["success"] is False
        assert response["error"]["error_code"] == "CALCULATION_ERROR"
        assert response["error"]["details"]["standard"] == "NEC"

    def test_system_error_response(self):
        response = ErrorHandler().create_error_response(RuntimeError("boom"))
        assert response["error"]["error_code"] == "SYSTEM_ERROR"
        assert response["error"]["details"]["original_error"] == "boom"

    def test_handle_and_log(self, caplog):
        handler = ErrorHandler(logging.getLogger("test.errors"))
        with caplog.at_level(logging.WARNING, logger="test.errors"):
            handler.handle_and_log(ValidationError("bad"), {"panel_id": "wire-calc"})
        assert "VALIDATION_ERROR" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
