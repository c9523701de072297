"""
Shared helpers for the API routers
"""
from fastapi import HTTPException

from scoreboard import state
from scoreboard.models import EngineResult, ErrorKind


ERROR_STATUS = {
    ErrorKind.TEAM_NOT_FOUND: 404,
    ErrorKind.UNKNOWN_PROBLEM: 404,
    ErrorKind.INVALID_ARGUMENT: 400,
}


def call_engine(operation: str, *args) -> EngineResult:
    """
    Run one engine operation under the engine lock

    Raises:
        HTTPException: If the engine rejected the operation
    """
    with state.ENGINE_LOCK:
        result = getattr(state.get_engine(), operation)(*args)

    if not result.success:
        raise HTTPException(
            status_code=ERROR_STATUS.get(result.error, 409),
            detail={"error": result.error.value, "message": result.message},
        )
    return result
