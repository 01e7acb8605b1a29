"""Outcome of delegating a request to the rest of the pipeline.

A delegation either passes the downstream response through untouched or
fails with a single catch-all variant carrying the fault's description.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from starlette.responses import Response


class InterceptState(str, Enum):
    """Per-request states of the error-translation middleware."""

    DELEGATED = "delegated"
    PASSED_THROUGH = "passed_through"
    TRANSLATED = "translated"


@dataclass(frozen=True)
class PassedThrough:
    """The continuation completed and produced ``response``."""

    response: Response

    @property
    def state(self) -> InterceptState:
        return InterceptState.PASSED_THROUGH


@dataclass(frozen=True)
class Failed:
    """The continuation raised; ``description`` becomes the error details."""

    description: str
    exception: Exception = field(repr=False, compare=False)

    @property
    def state(self) -> InterceptState:
        return InterceptState.TRANSLATED


Outcome = PassedThrough | Failed
