"""Parser for a personal exercise log text format."""

import importlib.metadata

from .errors import (
    DateParseError,
    FieldKind,
    GymLogParserError,
    InvalidNumberError,
    LogReadError,
    LogSyntaxError,
    StructuralError,
    TargetRangeError,
)
from .models import Attempt, ExerciseRecord, Set, TargetReps
from .parser import parse_exercise_log, parse_exercise_log_file

try:
    __version__ = importlib.metadata.version("gym-log-parser")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "Attempt",
    "DateParseError",
    "ExerciseRecord",
    "FieldKind",
    "GymLogParserError",
    "InvalidNumberError",
    "LogReadError",
    "LogSyntaxError",
    "Set",
    "StructuralError",
    "TargetRangeError",
    "TargetReps",
    "parse_exercise_log",
    "parse_exercise_log_file",
]
