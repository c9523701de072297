"""
Global application state
Shared resources accessible across the API routers
"""
import threading
from typing import Optional

from scoreboard.models import ContestSettings
from scoreboard.services.contest import ContestEngine

# Contest settings, loaded at startup
SETTINGS: ContestSettings = ContestSettings()

# The contest served by this process
ENGINE: Optional[ContestEngine] = None

# Serializes every engine call: one event at a time
ENGINE_LOCK = threading.Lock()


def reset_engine(settings: Optional[ContestSettings] = None) -> ContestEngine:
    """Replace the served contest with a fresh one"""
    global ENGINE, SETTINGS
    if settings is not None:
        SETTINGS = settings
    ENGINE = ContestEngine(SETTINGS)
    return ENGINE


def get_engine() -> ContestEngine:
    if ENGINE is None:
        return reset_engine()
    return ENGINE
