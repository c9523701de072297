"""
Submission endpoints
"""
from typing import Optional

from fastapi import APIRouter, HTTPException
import logging

from scoreboard.api.deps import call_engine


router = APIRouter(tags=["submission"])
logger = logging.getLogger(__name__)


@router.post("/submit")
async def submit(payload: dict):
    """
    Record a judged submission

    Request:
        {
            "problem": "A",
            "team_name": "alpha",
            "status": "Accepted",   # unknown labels count as Wrong_Answer
            "time": 42
        }
    """
    problem = payload.get("problem")
    team_name = payload.get("team_name") or payload.get("teamName")
    status = payload.get("status", "")
    time = payload.get("time")

    if not problem or not team_name or time is None:
        raise HTTPException(status_code=400, detail="problem, team_name and time are required")

    try:
        timestamp = int(time)
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail=f"Invalid time: {time}")

    call_engine("submit", problem, team_name, status, timestamp)
    return {"success": True}


@router.get("/submissions/last")
async def last_submission(team: str, problem: Optional[str] = "ALL", status: Optional[str] = "ALL"):
    """Last submission of a team, optionally filtered by problem and status"""
    result = call_engine("query_submission", team, problem, status)
    query = result.value
    return {
        "found": query.found,
        "submission": query.submission.model_dump(mode="json") if query.found else None,
        "message": result.message if query.found else "Cannot find any submission.",
    }
