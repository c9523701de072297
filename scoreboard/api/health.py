"""
Health check and system status endpoints
"""
from fastapi import APIRouter
from scoreboard import state


router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint"""
    with state.ENGINE_LOCK:
        engine = state.get_engine()
        return {
            "status": "ok",
            "message": "ICPC Scoreboard Server",
            "version": "1.0.0",
            "started": engine.started,
            "frozen": engine.is_frozen,
            "total_teams": len(engine.registry),
            "total_submissions": len(engine.log),
        }
