"""
FastAPI main application
ICPC Scoreboard Server - live board, freeze and scroll

Modular architecture with separated API routers in scoreboard/api/:
- health.py: Health check and contest status
- contest.py: Contest control (start, freeze, scoreboard, scroll, end, reset)
- team.py: Team registration
- submission.py: Submissions and submission queries
- leaderboard.py: Ranking queries

All routers access the served contest via scoreboard.state.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import os

from scoreboard import state
from scoreboard.config import load_settings_or_default, setup_logging

# Import all API routers
from scoreboard.api import health, contest, team, submission, leaderboard


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: load settings and create the contest
    settings = load_settings_or_default(os.environ.get("SCOREBOARD_CONFIG"))
    setup_logging(settings)
    state.reset_engine(settings)
    logger.info(f"✅ Server started (penalty per wrong attempt: {settings.penalty_per_wrong})")

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="ICPC Scoreboard Server",
    description="Contest scoreboard with freeze and scroll (unfreeze) support",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware (allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Contest endpoints (POST /contest/start, /contest/freeze, /contest/scroll, GET /contest/scoreboard, ...)
app.include_router(contest.router)

# Team registration (POST /teams/register)
app.include_router(team.router)

# Submission endpoints (POST /submit, GET /submissions/last)
app.include_router(submission.router)

# Ranking endpoint (GET /ranking/{team})
app.include_router(leaderboard.router)


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
