"""Dashboard route."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...services.dashboard import Dashboard
from ..session import get_current_user, get_workout_repository

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("")
async def dashboard_page(request: Request):
    """Personal stats and leaderboard for the signed-in user."""
    user = await get_current_user(request)
    if user is None:
        return JSONResponse({"error": "Not signed in", "login": "/auth/login"}, status_code=401)

    dashboard = Dashboard(get_workout_repository(request), user)
    await dashboard.refresh()
    return dashboard.to_dict()
