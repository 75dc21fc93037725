"""Tests for leaderboard aggregation."""

import pytest

from workout_competition.models.workout import Exercise
from workout_competition.services.leaderboard import compute_leaderboard


@pytest.fixture
def two_user_records(make_record):
    """A goes 10 -> 20 pushups, B stays at 5."""
    return [
        make_record("user-a-0000", pushups=10, squats=20),
        make_record("user-b-0000", pushups=5, squats=10),
        make_record("user-a-0000", pushups=20, squats=20),
        make_record("user-b-0000", pushups=5, squats=15),
    ]


class TestComputeLeaderboard:
    """Tests for compute_leaderboard."""

    def test_no_records_is_no_competition_data(self):
        assert compute_leaderboard([], current_user_id="anyone") is None

    def test_leader_and_rank(self, two_user_records):
        board = compute_leaderboard(two_user_records, current_user_id="user-b-0000")

        leader = board.leader(Exercise.PUSHUPS)
        assert leader.user_id == "user-a-0000"
        assert leader.percent_increase == pytest.approx(100.0)
        assert board.current_user_rank(Exercise.PUSHUPS) == 2

    def test_each_exercise_ranked_independently(self, two_user_records):
        board = compute_leaderboard(two_user_records, current_user_id="user-b-0000")

        assert board.leader(Exercise.SQUATS).user_id == "user-b-0000"
        assert board.current_user_rank(Exercise.SQUATS) == 1

    def test_display_names(self, two_user_records):
        board = compute_leaderboard(two_user_records, current_user_id="user-a-0000")

        ranking = board.standings[Exercise.PUSHUPS].ranking
        assert ranking[0].display_name == "You"
        assert ranking[1].display_name == "User user-b-0"

    def test_current_user_without_records_is_unranked(self, two_user_records):
        board = compute_leaderboard(two_user_records, current_user_id="newcomer")

        for exercise in Exercise:
            assert board.current_user_rank(exercise) is None

    def test_anonymous_viewer_is_unranked(self, two_user_records):
        board = compute_leaderboard(two_user_records)
        assert board.current_user_rank(Exercise.PUSHUPS) is None

    def test_ranks_are_contiguous_and_ordered(self, make_record):
        records = []
        for user in ["a", "b", "c", "d", "e"]:
            records.append(make_record(user, situps=10))
        for i, user in enumerate(["a", "b", "c", "d", "e"]):
            records.append(make_record(user, situps=10 + (i * 7) % 5))

        board = compute_leaderboard(records)
        for exercise in Exercise:
            ranking = board.standings[exercise].ranking
            assert [entry.rank for entry in ranking] == [1, 2, 3, 4, 5]
            increases = [entry.percent_increase for entry in ranking]
            assert increases == sorted(increases, reverse=True)

    def test_ties_keep_order_of_first_appearance(self, make_record):
        records = [
            make_record("late", pullups=0),
            make_record("early", pullups=0),
            make_record("early", pullups=4),
            make_record("late", pullups=4),
        ]
        board = compute_leaderboard(records)

        ranking = board.standings[Exercise.PULLUPS].ranking
        assert [entry.user_id for entry in ranking] == ["late", "early"]

    def test_zero_baseline_counts_as_no_increase(self, make_record):
        records = [
            make_record("zero", pushups=0),
            make_record("steady", pushups=10),
            make_record("zero", pushups=50),
            make_record("steady", pushups=11),
        ]
        board = compute_leaderboard(records)

        assert board.leader(Exercise.PUSHUPS).user_id == "steady"
        assert board.standings[Exercise.PUSHUPS].ranking[1].percent_increase == 0.0

    def test_participant_count(self, two_user_records):
        board = compute_leaderboard(two_user_records)
        assert board.participant_count == 2

    def test_repeated_aggregation_is_identical(self, two_user_records):
        first = compute_leaderboard(two_user_records, current_user_id="user-a-0000")
        second = compute_leaderboard(two_user_records, current_user_id="user-a-0000")
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_to_dict(self, two_user_records):
        data = compute_leaderboard(two_user_records, current_user_id="user-a-0000").to_dict()

        assert data["participants"] == 2
        assert data["your_ranks"]["pushups"] == 1
        pushups = data["standings"]["pushups"]
        assert pushups["leader"]["display_name"] == "You"
        assert [entry["rank"] for entry in pushups["ranking"]] == [1, 2]
