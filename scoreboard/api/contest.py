"""
Contest control endpoints
"""
from fastapi import APIRouter, HTTPException
import logging

from scoreboard import state
from scoreboard.api.deps import call_engine


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contest", tags=["contest"])


@router.post("/start")
async def start_contest_endpoint(request: dict):
    """
    Start the contest

    Request:
        {
            "duration": 300,      # minutes, informational
            "problem_count": 12
        }
    """
    duration = request.get("duration", 0)
    problem_count = request.get("problem_count")

    if not problem_count:
        raise HTTPException(status_code=400, detail="problem_count required")

    try:
        duration = int(duration)
        problem_count = int(problem_count)
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid duration/problem_count: {duration}, {problem_count}"
        )

    result = call_engine("start_contest", duration, problem_count)

    return {
        "success": True,
        "problems": state.get_engine().problems,
        "message": result.message,
    }


@router.post("/freeze")
async def freeze_endpoint():
    """Freeze the scoreboard"""
    result = call_engine("freeze")
    return {"success": True, "message": result.message}


@router.post("/scroll")
async def scroll_endpoint():
    """
    Reveal all frozen results

    Response:
        {
            "before": {...},      # scoreboard before any reveal
            "changes": [...],     # ranking changes in reveal order
            "after": {...}        # final scoreboard
        }
    """
    result = call_engine("scroll")
    report = result.value
    logger.info(f"📜 Scroll via API: {len(report.changes)} ranking changes")
    return {
        "success": True,
        "message": result.message,
        **report.model_dump(mode="json"),
    }


@router.post("/end")
async def end_contest_endpoint():
    """End the contest"""
    result = call_engine("end_contest")
    return {"success": True, "message": result.message}


@router.get("/scoreboard")
async def scoreboard_endpoint():
    """
    Recompute the ranking and return the scoreboard (flush)

    Each row carries rank, solved count, penalty and one cell per problem:
    "+", "+2" (solved), "-1/3", "0/1" (frozen pending), ".", "-2" (unsolved)
    """
    result = call_engine("flush")
    return result.value.model_dump(mode="json")


@router.post("/reset")
async def reset_contest():
    """Replace the contest with an empty one (testing only)"""
    with state.ENGINE_LOCK:
        state.reset_engine()
    logger.info("🔄 Contest reset")

    return {
        "success": True,
        "message": "Contest reset"
    }
