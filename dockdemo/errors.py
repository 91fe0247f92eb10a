"""Module errors: structured error taxonomy for the dockdemo server."""
#
from enum import Enum
from typing import Dict, Any, Optional
# PURPOSE:
# Every failure the API can report goes through one exception type with an
# error code, a human-readable message and an HTTP status. The FastAPI
# exception handler in dockdemo.server.api turns it into a JSON body.
#
# ERROR CODE FORMAT:
# - LOG_XXX: Log store lookups
# - SCENARIO_XXX: Scenario lookup and execution
# - CONFIG_XXX: Configuration errors
# - SYSTEM_XXX: Anything else
#
# USAGE:
#   from dockdemo.errors import ScenarioExecutionError
#
#   raise ScenarioExecutionError("storage", "volume driver unavailable")
#
class ErrorCode(Enum):
    # Log Errors
    CATEGORY_NOT_FOUND = "LOG_001"

    # Scenario Errors
    SCENARIO_EXECUTION_FAILED = "SCENARIO_001"
    SCENARIO_NOT_FOUND = "SCENARIO_002"

    # Config Errors
    CONFIG_INVALID = "CONFIG_001"

    # System Errors
    SYSTEM_INTERNAL_ERROR = "SYSTEM_001"


class DemoError(Exception):
    """
    Base exception class for dockdemo with structured error information.

    Attributes:
        code: ErrorCode enum value (e.g., "LOG_001")
        message: Human-readable error message, surfaced verbatim to API callers
        details: Optional dictionary with additional context
        http_status: Suggested HTTP status code for API responses
    """

    HTTP_STATUS_MAP: Dict[ErrorCode, int] = {
        ErrorCode.CATEGORY_NOT_FOUND: 404,
        ErrorCode.SCENARIO_EXECUTION_FAILED: 500,
        ErrorCode.SCENARIO_NOT_FOUND: 404,
        ErrorCode.CONFIG_INVALID: 500,
        ErrorCode.SYSTEM_INTERNAL_ERROR: 500,
    }

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        http_status: Optional[int] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.http_status = http_status or self.HTTP_STATUS_MAP.get(code, 500)

        # Build exception message with code for easy debugging
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to the JSON body returned by the API.

        The dashboard reads ``success`` and ``error``; ``code`` and
        ``details`` are there for anyone debugging with curl.
        """
        return {
            "success": False,
            "error": self.message,
            "code": self.code.value,
            "details": self.details,
        }


class CategoryNotFound(DemoError):
    """Raised when a log lookup names a category outside the fixed set."""

    def __init__(self, category: str):
        super().__init__(
            ErrorCode.CATEGORY_NOT_FOUND,
            "Category not found",
            details={"category": category},
        )
        self.category = category


class ScenarioNotFound(DemoError):
    """Raised when a test route names a scenario that does not exist."""

    def __init__(self, name: str):
        super().__init__(
            ErrorCode.SCENARIO_NOT_FOUND,
            f"Unknown scenario: {name}",
            details={"scenario": name},
        )
        self.name = name


class ScenarioExecutionError(DemoError):
    """
    Raised when a step of a scenario script fails.

    The message is the original failure message, unchanged. Whatever the
    script mutated before the failure stays applied.
    """

    def __init__(self, scenario: str, message: str, step: Optional[int] = None):
        details: Dict[str, Any] = {"scenario": scenario}
        if step is not None:
            details["step"] = step
        super().__init__(ErrorCode.SCENARIO_EXECUTION_FAILED, message, details=details)
        self.scenario = scenario
        self.step = step


def config_error(message: str, **details: Any) -> DemoError:
    """Build the error raised for an unusable environment value."""
    return DemoError(ErrorCode.CONFIG_INVALID, message, details=details)


__all__ = [
    "ErrorCode",
    "DemoError",
    "CategoryNotFound",
    "ScenarioNotFound",
    "ScenarioExecutionError",
    "config_error",
]
