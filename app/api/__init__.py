"""
API routers module.
"""
from app.api.auth import router as auth_router
from app.api.calculator import router as calculator_router
from app.api.dashboard import router as dashboard_router
from app.api.leaderboard import router as leaderboard_router
from app.api.profile import router as profile_router

__all__ = [
    "auth_router",
    "calculator_router",
    "dashboard_router",
    "leaderboard_router",
    "profile_router",
]
