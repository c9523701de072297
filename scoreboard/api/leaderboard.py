"""
Ranking endpoints
"""
from fastapi import APIRouter

from scoreboard.api.deps import call_engine


router = APIRouter(tags=["leaderboard"])


@router.get("/ranking/{team_name}")
async def get_ranking(team_name: str):
    """Current rank of a team; stale while the board is frozen"""
    result = call_engine("query_rank", team_name)
    return {
        **result.value.model_dump(mode="json"),
        "warning": result.warning,
    }
