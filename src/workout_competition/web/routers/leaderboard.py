"""Leaderboard routes."""

from fastapi import APIRouter, Request

from ...services.dashboard import Dashboard
from ..session import get_current_user, get_workout_repository

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("")
async def leaderboard(request: Request):
    """Competition standings. Anonymous viewers get no personal ranks."""
    user = await get_current_user(request)
    dashboard = Dashboard(get_workout_repository(request), user)
    await dashboard.refresh()
    return dashboard.leaderboard_dict()
