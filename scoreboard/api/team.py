"""Team registration endpoints"""
from fastapi import APIRouter, HTTPException

from scoreboard.api.deps import call_engine


router = APIRouter(prefix="/teams", tags=["teams"])


@router.post("/register")
async def register(payload: dict):
    team_name = payload.get("team_name") or payload.get("teamName")
    if not team_name:
        raise HTTPException(status_code=400, detail="team_name is required")
    result = call_engine("register_team", team_name)
    return {
        "success": True,
        "team_name": team_name.strip(),
        "message": result.message,
    }
