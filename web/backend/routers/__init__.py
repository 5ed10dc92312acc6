"""API route handlers."""

from .leaderboard import router as leaderboard_router
from .matches import router as matches_router
from .admin import router as admin_router
