"""Derived views over a workout session's sets.

Every function here is pure: it reads the set collection it is given and
returns a fresh result. Nothing is cached, so callers always see the latest
state of the collection. Storage order is never trusted; ordering is always
re-derived from ``completed_at`` and ``set_number``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from app.core.clock import as_utc
from app.core.enums import ExerciseCategory


class SetLike(Protocol):
    exercise_name: str
    exercise_category: ExerciseCategory
    weight: float
    reps: int
    set_number: int
    completed_at: datetime


@dataclass(frozen=True)
class ExerciseGroup:
    """Sets of one exercise, ordered by set number."""

    exercise: str
    category: ExerciseCategory
    sets: list[SetLike] = field(default_factory=list)


def set_volume(weight: float, reps: int) -> float:
    """Weight moved in one set (weight × reps)."""
    return float(weight) * reps


def display_weight(weight: float) -> str:
    """'100' for whole weights, one decimal otherwise ('135.5').

    Finer values go through fixed-point formatting, so 135.567 → '135.6'
    (half-to-even on the stored binary value).
    """
    if float(weight) % 1.0 == 0:
        return f"{weight:.0f}"
    return f"{weight:.1f}"


def total_volume(sets: Iterable[SetLike]) -> float:
    return sum((set_volume(s.weight, s.reps) for s in sets), 0.0)


def _by_completion(sets: Iterable[SetLike]) -> list[SetLike]:
    # sorted() is stable: sets completed at the same instant keep input order
    return sorted(sets, key=lambda s: as_utc(s.completed_at))


def unique_exercises(sets: Iterable[SetLike]) -> list[str]:
    """Distinct exercise names in the order they were first performed."""
    seen: set[str] = set()
    names: list[str] = []
    for s in _by_completion(sets):
        if s.exercise_name not in seen:
            seen.add(s.exercise_name)
            names.append(s.exercise_name)
    return names


def grouped_sets(sets: Iterable[SetLike]) -> list[ExerciseGroup]:
    """Sets bucketed by exercise name.

    Groups follow first-performed order (same as ``unique_exercises``); sets
    inside a group follow ``set_number``, not completion time.
    """
    order: list[str] = []
    buckets: dict[str, tuple[ExerciseCategory, list[SetLike]]] = {}
    for s in _by_completion(sets):
        if s.exercise_name not in buckets:
            order.append(s.exercise_name)
            buckets[s.exercise_name] = (s.exercise_category, [])
        buckets[s.exercise_name][1].append(s)
    return [
        ExerciseGroup(
            exercise=name,
            category=buckets[name][0],
            sets=sorted(buckets[name][1], key=lambda s: s.set_number),
        )
        for name in order
    ]


def next_set_number(sets: Iterable[SetLike], exercise_name: str) -> int:
    """Count of this exercise's current sets + 1; may repeat a number left after a deletion."""
    return sum(1 for s in sets if s.exercise_name == exercise_name) + 1


def format_duration(started_at: datetime, ended_at: datetime | None) -> str | None:
    """'45m' under an hour, '1h 15m' otherwise; None while the session is open."""
    if ended_at is None:
        return None
    seconds = int((as_utc(ended_at) - as_utc(started_at)).total_seconds())
    minutes = seconds // 60
    if minutes >= 60:
        return f"{minutes // 60}h {minutes % 60}m"
    return f"{minutes}m"
