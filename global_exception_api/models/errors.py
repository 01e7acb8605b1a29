"""Error response model and application exceptions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request."


class GlobalExceptionApiError(Exception):
    """Base class for exceptions raised by this application's routes."""


class DemoFaultError(GlobalExceptionApiError):
    """Raised on purpose by the demo routes to exercise error translation."""


def describe_fault(exc: BaseException) -> str:
    """Return the human-readable description of an exception.

    Falls back to the exception class name when ``str(exc)`` itself fails.
    """
    try:
        return str(exc)
    except Exception:
        return type(exc).__name__


class ErrorResponse(BaseModel):
    """Uniform body returned for every unhandled fault.

    ``message`` is the same for all failures and never carries anything
    derived from the fault; ``details`` is the fault's description.
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(GENERIC_ERROR_MESSAGE, description="Fixed user-facing message")
    details: str = Field(..., description="Description of the underlying failure")

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorResponse:
        """Build an error body from an intercepted exception."""
        return cls(details=describe_fault(exc))
