"""ASGI middleware for cross-cutting request handling."""

from global_exception_api.middleware.global_exception import (
    GlobalExceptionMiddleware,
    delegate,
    render_error,
    translate_errors,
)

__all__ = [
    "GlobalExceptionMiddleware",
    "delegate",
    "render_error",
    "translate_errors",
]
