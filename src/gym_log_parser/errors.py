"""
Error types raised while parsing exercise logs.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from pathlib import Path


class FieldKind(str, enum.Enum):
    """Part of the log a structural error refers to."""

    DATE = "date"
    EXERCISE_NAME = "exercise_name"
    TARGET = "target"
    SET_GROUP = "set_group"
    FILE_CONTENT = "file_content"


class GymLogParserError(Exception):
    """Base class for every error raised by gym_log_parser."""


class LogSyntaxError(GymLogParserError):
    """
    The text does not match the log grammar.

    ``line`` and ``column`` are 1-based; both are ``None`` when the parser ran
    out of input.
    """

    def __init__(
        self,
        line: int | None,
        column: int | None,
        expected: Iterable[str] = (),
        context: str = "",
    ) -> None:
        self.line = line
        self.column = column
        self.expected = tuple(sorted(set(expected)))
        self.context = context
        super().__init__(self._message())

    def _message(self) -> str:
        where = (
            f"line {self.line}, column {self.column}"
            if self.line is not None
            else "end of input"
        )
        msg = f"Parse error at {where}"
        if self.expected:
            msg += f": expected {', '.join(self.expected)}"
        if self.context:
            msg += f"\n{self.context}"
        return msg


class DateParseError(GymLogParserError):
    """The date token is not a valid calendar date."""

    def __init__(self, text: str, line: int | None = None) -> None:
        self.text = text
        self.line = line
        super().__init__(f"Date parsing error: {text!r} is not a valid DD.MM.YYYY date")


class InvalidNumberError(GymLogParserError):
    """A numeric token could not be converted to an unsigned integer."""

    def __init__(self, text: str, line: int | None = None) -> None:
        self.text = text
        self.line = line
        super().__init__(f"Invalid number format: {text!r}")


_STRUCTURAL_MESSAGES = {
    FieldKind.DATE: "Missing date",
    FieldKind.EXERCISE_NAME: "Exercise name parse error",
    FieldKind.TARGET: "Target parse error",
    FieldKind.SET_GROUP: "Set group parse error",
    FieldKind.FILE_CONTENT: "File content parse error",
}


class StructuralError(GymLogParserError):
    """A required part of a record is absent or malformed after tree walking."""

    def __init__(self, kind: FieldKind, line: int | None = None, detail: str = "") -> None:
        self.kind = kind
        self.line = line
        msg = _STRUCTURAL_MESSAGES[kind]
        if line is not None:
            msg += f" on line {line}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class TargetRangeError(StructuralError):
    """Target minimum reps exceed the maximum (strict mode only)."""

    def __init__(self, min_reps: int, max_reps: int, line: int | None = None) -> None:
        self.min_reps = min_reps
        self.max_reps = max_reps
        super().__init__(
            FieldKind.TARGET,
            line,
            f"min reps {min_reps} is greater than max reps {max_reps}",
        )


class LogReadError(GymLogParserError):
    """The log file could not be read."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"IO error: cannot read {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
