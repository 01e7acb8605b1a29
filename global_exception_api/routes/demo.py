"""Demo endpoints that succeed or fail on request.

They give the global exception middleware something to translate and let
the error contract be checked end to end.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from global_exception_api.models.errors import DemoFaultError

router = APIRouter(prefix="/demo", tags=["demo"])


@router.get("/ok")
async def succeed() -> dict:
    return {"ok": True}


@router.get("/fault")
async def fail(
    message: str = Query("Resource not found", description="Description of the raised fault"),
) -> dict:
    """Raise an unhandled ``DemoFaultError`` carrying ``message``."""
    raise DemoFaultError(message)
