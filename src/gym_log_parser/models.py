"""
Pydantic models for parsed exercise log records.
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class Attempt(BaseModel):
    """One weight/reps effort within a set. Weight is in kilograms."""

    model_config = ConfigDict(frozen=True)

    weight: int = Field(..., ge=0, description="Weight lifted, kg")
    reps: int = Field(..., ge=0, description="Repetitions completed")


class Set(BaseModel):
    """
    One set of an exercise.

    Holds more than one attempt when weight or reps were adjusted mid-set.
    """

    model_config = ConfigDict(frozen=True)

    attempts: tuple[Attempt, ...] = Field(..., min_length=1)


class TargetReps(BaseModel):
    """Prescribed scheme, e.g. ``3 x 10-15 reps``."""

    model_config = ConfigDict(frozen=True)

    sets_count: int = Field(..., ge=0)
    min_reps: int = Field(..., ge=0)
    # Not required to be >= min_reps unless strict target checks are enabled.
    max_reps: int = Field(..., ge=0)


class ExerciseRecord(BaseModel):
    """A single logged exercise session (one line of the log)."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    exercise_name: str = Field(..., min_length=1)
    target: TargetReps
    sets: tuple[Set, ...] = ()
