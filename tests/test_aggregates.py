"""Derived views: volume, display weight, unique exercises, grouping, duration."""

from datetime import datetime, timedelta, timezone

import pytest

from app.core.enums import ExerciseCategory
from app.models.workout import WorkoutSession, WorkoutSet
from app.services import aggregates

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


# ── per-set values ──


def test_volume(make_set):
    assert make_set(weight=135, reps=10).volume == 1350


def test_volume_with_zero_reps(make_set):
    assert make_set(weight=135, reps=0).volume == 0


def test_volume_with_decimal_weight(make_set):
    assert make_set(weight=135.5, reps=4).volume == pytest.approx(542)


@pytest.mark.parametrize(
    "weight, expected",
    [
        (225, "225"),
        (225.5, "225.5"),
        (100.0, "100"),
        (0, "0"),
        (2.5, "2.5"),
        (135.567, "135.6"),
    ],
)
def test_display_weight(weight, expected):
    assert aggregates.display_weight(weight) == expected


def test_set_round_trip():
    s = WorkoutSet(
        exercise_name="Squat",
        exercise_category=ExerciseCategory.LEGS,
        weight=225.5,
        reps=5,
        set_number=3,
    )
    assert s.exercise_name == "Squat"
    assert s.exercise_category is ExerciseCategory.LEGS
    assert s.weight == 225.5
    assert s.reps == 5
    assert s.set_number == 3
    assert s.completed_at is not None


# ── total volume ──


def test_total_volume_empty():
    assert aggregates.total_volume([]) == 0
    assert WorkoutSession().total_volume == 0


def test_total_volume_single(make_set):
    assert aggregates.total_volume([make_set(weight=100, reps=10)]) == 1000


def test_total_volume_multiple(make_set):
    sets = [
        make_set(weight=100, reps=10),
        make_set(weight=100, reps=8, set_number=2, at=60),
        make_set(name="Squat", weight=150, reps=5, at=120),
    ]
    assert aggregates.total_volume(sets) == 2550


# ── unique exercises ──


def test_unique_exercises_deduplicates(make_set):
    sets = [
        make_set("Bench Press", at=0),
        make_set("Bench Press", set_number=2, at=60),
        make_set("Squat", ExerciseCategory.LEGS, at=120),
    ]
    names = aggregates.unique_exercises(sets)
    assert len(names) == 2
    assert names.count("Bench Press") == 1
    assert names.count("Squat") == 1


def test_unique_exercises_follow_completion_not_input_order(make_set):
    sets = [
        make_set("Squat", ExerciseCategory.LEGS, at=300),
        make_set("Deadlift", ExerciseCategory.BACK, at=200),
        make_set("Bench Press", at=100),
        make_set("Deadlift", ExerciseCategory.BACK, set_number=2, at=50),
    ]
    assert aggregates.unique_exercises(sets) == ["Deadlift", "Bench Press", "Squat"]


def test_unique_exercises_ties_keep_input_order(make_set):
    sets = [make_set("Row", at=0), make_set("Curl", at=0), make_set("Press", at=0)]
    assert aggregates.unique_exercises(sets) == ["Row", "Curl", "Press"]


def test_unique_exercises_mixed_naive_and_aware(make_set):
    naive = make_set("Squat", at=0)
    naive.completed_at = (T0 - timedelta(minutes=5)).replace(tzinfo=None)
    sets = [make_set("Bench Press", at=0), naive]
    assert aggregates.unique_exercises(sets) == ["Squat", "Bench Press"]


# ── grouped sets ──


def test_grouped_sets_order_and_categories(make_set):
    sets = [
        make_set("Squat", ExerciseCategory.LEGS, at=10),
        make_set("Bench Press", ExerciseCategory.CHEST, at=0),
        make_set("Squat", ExerciseCategory.LEGS, set_number=2, at=20),
    ]
    groups = aggregates.grouped_sets(sets)
    assert [g.exercise for g in groups] == ["Bench Press", "Squat"]
    assert [g.category for g in groups] == [ExerciseCategory.CHEST, ExerciseCategory.LEGS]
    assert [len(g.sets) for g in groups] == [1, 2]


def test_grouped_sets_sorted_by_set_number(make_set):
    # Set 2 was saved before set 1
    sets = [
        make_set("Bench Press", set_number=2, at=0),
        make_set("Bench Press", set_number=1, at=30),
    ]
    (group,) = aggregates.grouped_sets(sets)
    assert group.sets[0].set_number == 1
    assert group.sets[1].set_number == 2


def test_grouped_sets_keep_numbering_gaps(make_set):
    sets = [make_set(set_number=1, at=0), make_set(set_number=3, at=60)]
    (group,) = aggregates.grouped_sets(sets)
    assert [s.set_number for s in group.sets] == [1, 3]


def test_grouped_sets_match_unique_exercises(make_set):
    sets = [
        make_set("Curl", ExerciseCategory.ARMS, at=40),
        make_set("Plank", ExerciseCategory.CORE, at=5),
        make_set("Curl", ExerciseCategory.ARMS, set_number=2, at=50),
        make_set("Row", ExerciseCategory.BACK, at=20),
    ]
    groups = aggregates.grouped_sets(sets)
    assert [g.exercise for g in groups] == aggregates.unique_exercises(sets)


def test_empty_views():
    assert aggregates.unique_exercises([]) == []
    assert aggregates.grouped_sets([]) == []


def test_views_do_not_mutate_input(make_set):
    sets = [make_set("B", at=10), make_set("A", at=0)]
    snapshot = list(sets)
    aggregates.grouped_sets(sets)
    aggregates.unique_exercises(sets)
    assert sets == snapshot


# ── next set number ──


def test_next_set_number_counts_same_exercise_only(make_set):
    sets = [make_set("Bench Press"), make_set("Bench Press", set_number=2), make_set("Squat")]
    assert aggregates.next_set_number(sets, "Bench Press") == 3
    assert aggregates.next_set_number(sets, "Squat") == 2
    assert aggregates.next_set_number(sets, "Deadlift") == 1


def test_next_set_number_after_deletion_can_repeat_existing_number(make_set):
    # Sets 1 and 2 logged, set 1 deleted: one remains, so the next is numbered 2 again
    remaining = [make_set("Bench Press", set_number=2)]
    assert aggregates.next_set_number(remaining, "Bench Press") == 2


# ── duration ──


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (timedelta(minutes=45), "45m"),
        (timedelta(seconds=90), "1m"),
        (timedelta(seconds=59), "0m"),
        (timedelta(0), "0m"),
        (timedelta(minutes=75), "1h 15m"),
        (timedelta(minutes=60), "1h 0m"),
        (timedelta(hours=2, minutes=5, seconds=59), "2h 5m"),
    ],
)
def test_format_duration(elapsed, expected):
    assert aggregates.format_duration(T0, T0 + elapsed) == expected


def test_format_duration_active():
    assert aggregates.format_duration(T0, None) is None


def test_format_duration_negative_does_not_raise():
    assert isinstance(aggregates.format_duration(T0, T0 - timedelta(minutes=5)), str)


def test_format_duration_naive_end():
    ended = (T0 + timedelta(minutes=30)).replace(tzinfo=None)
    assert aggregates.format_duration(T0, ended) == "30m"


# ── session properties ──


def test_session_is_active_until_ended():
    session = WorkoutSession(name="Test")
    assert session.is_active
    assert session.formatted_duration is None
    session.ended_at = session.date + timedelta(minutes=45)
    assert not session.is_active
    assert session.formatted_duration == "45m"


def test_session_defaults():
    session = WorkoutSession()
    assert session.name == ""
    assert session.notes == ""
    assert session.date is not None
    assert session.ended_at is None


def test_session_views_reflect_latest_sets(make_set):
    session = WorkoutSession(date=T0)
    make_set("Bench Press", session=session, at=0)
    assert session.unique_exercises == ["Bench Press"]
    assert session.total_volume == 1000

    make_set("Squat", ExerciseCategory.LEGS, weight=200, reps=5, session=session, at=60)
    assert session.unique_exercises == ["Bench Press", "Squat"]
    assert session.total_volume == 2000
    assert [g.exercise for g in session.grouped_sets] == ["Bench Press", "Squat"]


def test_session_views_are_idempotent(make_set):
    session = WorkoutSession(date=T0)
    make_set("Squat", ExerciseCategory.LEGS, session=session, at=30)
    make_set("Bench Press", session=session, at=0)
    make_set("Bench Press", set_number=2, session=session, at=90)

    assert session.unique_exercises == session.unique_exercises
    assert session.grouped_sets == session.grouped_sets
    assert session.total_volume == session.total_volume
    assert session.formatted_duration == session.formatted_duration
