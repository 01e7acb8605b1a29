"""Pydantic data models and outcome types for error translation."""

from global_exception_api.models.errors import (
    GENERIC_ERROR_MESSAGE,
    DemoFaultError,
    ErrorResponse,
    GlobalExceptionApiError,
    describe_fault,
)
from global_exception_api.models.outcome import Failed, InterceptState, Outcome, PassedThrough

__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "DemoFaultError",
    "ErrorResponse",
    "Failed",
    "GlobalExceptionApiError",
    "InterceptState",
    "Outcome",
    "PassedThrough",
    "describe_fault",
]
