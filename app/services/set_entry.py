"""Validation of weight/reps input before a set is logged."""

import math
from typing import NamedTuple


class InvalidSetEntryError(ValueError):
    """Weight or reps input cannot be logged."""


class SetEntry(NamedTuple):
    weight: float
    reps: int


def parse_weight(value: str | float | int) -> float:
    """Finite, non-negative real number (e.g. '135', '135.5')."""
    if isinstance(value, bool):
        raise InvalidSetEntryError(f"Weight is not a number: {value!r}")
    try:
        weight = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError) as e:
        raise InvalidSetEntryError(f"Weight is not a number: {value!r}") from e
    if not math.isfinite(weight) or weight < 0:
        raise InvalidSetEntryError(f"Weight must be a non-negative number: {value!r}")
    return weight


def parse_reps(value: str | int) -> int:
    """Whole number of reps, strictly positive."""
    if isinstance(value, bool):
        raise InvalidSetEntryError(f"Reps is not a whole number: {value!r}")
    try:
        reps = int(value.strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidSetEntryError(f"Reps is not a whole number: {value!r}") from e
    if isinstance(value, float) and not value.is_integer():
        raise InvalidSetEntryError(f"Reps is not a whole number: {value!r}")
    if reps <= 0:
        raise InvalidSetEntryError(f"Reps must be greater than zero: {value!r}")
    return reps


def parse_set_entry(weight: str | float | int, reps: str | int) -> SetEntry:
    """Raise InvalidSetEntryError unless both inputs can be logged."""
    return SetEntry(weight=parse_weight(weight), reps=parse_reps(reps))


def is_loggable(weight: str | float | int, reps: str | int) -> bool:
    """Whether the confirm action should be enabled for this input."""
    try:
        parse_set_entry(weight, reps)
    except InvalidSetEntryError:
        return False
    return True
