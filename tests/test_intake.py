"""Tests for record intake, refresh notifications and the dashboard."""

import aiosqlite
import pytest

from workout_competition.auth.identity import StaticIdentity
from workout_competition.db.repositories import UserRepository, WorkoutRepository
from workout_competition.models.user import AuthUser
from workout_competition.models.workout import Exercise
from workout_competition.services.dashboard import Dashboard
from workout_competition.services.events import RefreshNotifier, WorkoutLogged
from workout_competition.services.intake import NOT_LOGGED_IN, WorkoutIntake

USER = AuthUser(id="user-0001", email="a@example.com")


class RecordingRepository:
    """Stands in for WorkoutRepository and remembers what was stored."""

    def __init__(self, error: Exception | None = None):
        self.created = []
        self.error = error

    async def create(self, user_id, workout, created_at=None):
        if self.error:
            raise self.error
        self.created.append((user_id, workout))
        return None

    async def list_all(self, ascending=True):
        if self.error:
            raise self.error
        return []


class TestWorkoutIntake:
    """Tests for WorkoutIntake."""

    @pytest.mark.asyncio
    async def test_stores_record(self, db_path):
        user = await UserRepository(db_path).create("a@example.com")
        repo = WorkoutRepository(db_path)
        intake = WorkoutIntake(StaticIdentity(user), repo)

        result = await intake.submit(pushups="10", pullups=2, situps=30, squats=40)

        assert result.success
        assert result.record.user_id == user.id
        assert result.record.pushups == 10
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_negative_rejected_before_storage(self):
        repo = RecordingRepository()
        intake = WorkoutIntake(StaticIdentity(USER), repo)

        result = await intake.submit(pushups=-1, pullups=0, situps=0, squats=0)

        assert not result.success
        assert result.error.startswith("pushups:")
        assert repo.created == []

    @pytest.mark.asyncio
    async def test_count_too_large_to_store_is_rejected(self, db_path):
        user = await UserRepository(db_path).create("a@example.com")
        repo = WorkoutRepository(db_path)
        intake = WorkoutIntake(StaticIdentity(user), repo)

        result = await intake.submit(pushups=str(10**20), pullups=0, situps=0, squats=0)

        assert not result.success
        assert result.error.startswith("pushups:")
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_missing_field_rejected(self):
        repo = RecordingRepository()
        intake = WorkoutIntake(StaticIdentity(USER), repo)

        result = await intake.submit(pushups=1, pullups=None, situps=0, squats=0)

        assert "pullups:" in result.error
        assert repo.created == []

    @pytest.mark.asyncio
    async def test_requires_login(self):
        repo = RecordingRepository()
        intake = WorkoutIntake(StaticIdentity(None), repo)

        result = await intake.submit(pushups=1, pullups=1, situps=1, squats=1)

        assert result.error == NOT_LOGGED_IN
        assert result.to_dict() == {"error": NOT_LOGGED_IN}
        assert repo.created == []

    @pytest.mark.asyncio
    async def test_storage_error_passed_through(self):
        repo = RecordingRepository(error=aiosqlite.OperationalError("database is locked"))
        intake = WorkoutIntake(StaticIdentity(USER), repo)

        result = await intake.submit(pushups=1, pullups=1, situps=1, squats=1)

        assert result.error == "database is locked"

    @pytest.mark.asyncio
    async def test_publishes_workout_logged(self, db_path):
        user = await UserRepository(db_path).create("a@example.com")
        notifier = RefreshNotifier()
        seen = []

        async def listener(event):
            seen.append(event)

        notifier.subscribe(listener)
        intake = WorkoutIntake(StaticIdentity(user), WorkoutRepository(db_path), notifier)
        result = await intake.submit(pushups=1, pullups=1, situps=1, squats=1)

        assert seen == [WorkoutLogged(record=result.record)]

    @pytest.mark.asyncio
    async def test_rejected_submission_publishes_nothing(self):
        notifier = RefreshNotifier()
        seen = []

        async def listener(event):
            seen.append(event)

        notifier.subscribe(listener)
        intake = WorkoutIntake(StaticIdentity(USER), RecordingRepository(), notifier)
        await intake.submit(pushups=-5, pullups=1, situps=1, squats=1)

        assert seen == []


class TestRefreshNotifier:
    """Tests for RefreshNotifier."""

    @pytest.mark.asyncio
    async def test_unsubscribe(self, make_record):
        notifier = RefreshNotifier()
        seen = []

        async def listener(event):
            seen.append(event)

        unsubscribe = notifier.subscribe(listener)
        assert notifier.listener_count == 1
        unsubscribe()
        unsubscribe()
        assert notifier.listener_count == 0

        await notifier.publish(WorkoutLogged(record=make_record("a")))
        assert seen == []

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_block_others(self, make_record):
        notifier = RefreshNotifier()
        seen = []

        async def broken(event):
            raise RuntimeError("boom")

        async def working(event):
            seen.append(event)

        notifier.subscribe(broken)
        notifier.subscribe(working)
        await notifier.publish(WorkoutLogged(record=make_record("a")))

        assert len(seen) == 1


class TestDashboard:
    """Tests for the Dashboard view."""

    @pytest.mark.asyncio
    async def test_refreshes_after_submission(self, db_path):
        user = await UserRepository(db_path).create("a@example.com")
        repo = WorkoutRepository(db_path)
        notifier = RefreshNotifier()
        dashboard = Dashboard(repo, user, notifier)
        await dashboard.refresh()
        assert dashboard.personal is None
        assert dashboard.leaderboard is None

        intake = WorkoutIntake(StaticIdentity(user), repo, notifier)
        await intake.submit(pushups=10, pullups=0, situps=0, squats=0)
        await intake.submit(pushups=20, pullups=0, situps=0, squats=0)

        assert dashboard.refresh_count == 3
        assert dashboard.personal.total_workouts == 2
        assert dashboard.personal.percent_increase(Exercise.PUSHUPS) == pytest.approx(100.0)
        assert dashboard.leaderboard.current_user_rank(Exercise.PUSHUPS) == 1

    @pytest.mark.asyncio
    async def test_closed_dashboard_stops_refreshing(self, db_path):
        user = await UserRepository(db_path).create("a@example.com")
        repo = WorkoutRepository(db_path)
        notifier = RefreshNotifier()
        dashboard = Dashboard(repo, user, notifier)
        dashboard.close()

        intake = WorkoutIntake(StaticIdentity(user), repo, notifier)
        await intake.submit(pushups=10, pullups=0, situps=0, squats=0)

        assert dashboard.refresh_count == 0

    @pytest.mark.asyncio
    async def test_personal_stats_only_cover_own_history(self, db_path):
        users = UserRepository(db_path)
        alice = await users.create("alice@example.com")
        bob = await users.create("bob@example.com")
        repo = WorkoutRepository(db_path)
        await WorkoutIntake(StaticIdentity(alice), repo).submit(1, 1, 1, 1)
        await WorkoutIntake(StaticIdentity(bob), repo).submit(2, 2, 2, 2)
        await WorkoutIntake(StaticIdentity(bob), repo).submit(4, 2, 2, 2)

        dashboard = Dashboard(repo, alice)
        await dashboard.refresh()

        assert dashboard.personal.total_workouts == 1
        assert dashboard.leaderboard.participant_count == 2
        assert dashboard.leaderboard.current_user_rank(Exercise.PUSHUPS) == 2

    @pytest.mark.asyncio
    async def test_read_failure_falls_back_to_no_data(self):
        repo = RecordingRepository(error=aiosqlite.OperationalError("no such table"))
        dashboard = Dashboard(repo, USER)

        await dashboard.refresh()

        assert dashboard.personal is None
        assert dashboard.leaderboard is None
        assert dashboard.stats_dict()["stats"] is None
        assert dashboard.leaderboard_dict()["message"] == "No competition data yet."
