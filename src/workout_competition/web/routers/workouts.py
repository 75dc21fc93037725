"""Workout logging routes."""

import logging

import aiosqlite
from fastapi import APIRouter, Form, Request
from fastapi.responses import JSONResponse

from ...services.dashboard import Dashboard
from ...services.events import RefreshNotifier
from ...services.intake import NOT_LOGGED_IN, WorkoutIntake
from ...services.progress import records_for_user
from ..session import get_current_user, get_identity, get_workout_repository

log = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.post("")
async def log_workout(
    request: Request,
    pushups: str | None = Form(None),
    pullups: str | None = Form(None),
    situps: str | None = Form(None),
    squats: str | None = Form(None),
):
    """Log a workout and return the refreshed dashboard."""
    identity = get_identity(request)
    repository = get_workout_repository(request)

    # The dashboard re-reads once the intake announces the new workout
    notifier = RefreshNotifier()
    dashboard = Dashboard(repository, await identity.get_current_user(), notifier)
    intake = WorkoutIntake(identity, repository, notifier)

    try:
        result = await intake.submit(
            pushups=pushups,
            pullups=pullups,
            situps=situps,
            squats=squats,
        )
    finally:
        dashboard.close()

    if not result.success:
        status_code = 401 if result.error == NOT_LOGGED_IN else 400
        return JSONResponse(result.to_dict(), status_code=status_code)

    return {**result.to_dict(), "dashboard": dashboard.to_dict()}


@router.get("")
async def list_workouts(request: Request):
    """List the signed-in user's workouts, oldest first."""
    user = await get_current_user(request)
    if user is None:
        return JSONResponse({"error": NOT_LOGGED_IN}, status_code=401)

    try:
        records = await get_workout_repository(request).list_all(ascending=True)
    except aiosqlite.Error:
        log.exception("Error fetching workouts")
        records = []

    history = records_for_user(records, user.id)
    return {"workouts": [record.to_dict() for record in history]}


@router.get("/stats")
async def workout_stats(request: Request):
    """Personal stats for the signed-in user."""
    user = await get_current_user(request)
    if user is None:
        return JSONResponse({"error": NOT_LOGGED_IN}, status_code=401)

    dashboard = Dashboard(get_workout_repository(request), user)
    await dashboard.refresh()
    return dashboard.stats_dict()
