"""
Tree-to-model translation for parsed exercise logs.

The grammar only guarantees the shape of a record. Conversions that can fail
(dates, integers) and the completeness checks live here.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any

from lark import Token, Transformer, Tree, v_args
from lark.exceptions import VisitError

from .errors import (
    DateParseError,
    FieldKind,
    GymLogParserError,
    InvalidNumberError,
    StructuralError,
    TargetRangeError,
)
from .models import Attempt, ExerciseRecord, Set, TargetReps

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d.%m.%Y"
MAX_UINT = 2**32 - 1


def _line(node: Any) -> int | None:
    return getattr(node, "line", None)


def to_uint(token: Token | str) -> int:
    """Convert a numeric token to an unsigned 32-bit integer."""
    text = str(token).strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidNumberError(text, _line(token))
    value = int(text)
    if value > MAX_UINT:
        raise InvalidNumberError(text, _line(token))
    return value


class RecordTransformer(Transformer):
    """Turns ``record`` subtrees into ``ExerciseRecord`` models."""

    def __init__(self, strict_target_range: bool = False) -> None:
        super().__init__()
        self.strict_target_range = strict_target_range

    def date(self, children: list[Token]) -> dt.date:
        if not children:
            raise StructuralError(FieldKind.DATE)
        token = children[0]
        text = str(token).strip()
        try:
            return dt.datetime.strptime(text, DATE_FORMAT).date()
        except ValueError as e:
            raise DateParseError(text, _line(token)) from e

    def exercise_name(self, children: list[Token]) -> str:
        if not children:
            raise StructuralError(FieldKind.EXERCISE_NAME)
        name = str(children[0]).strip()
        if not name:
            raise StructuralError(FieldKind.EXERCISE_NAME, _line(children[0]), "name is blank")
        return name

    @v_args(meta=True)
    def target(self, meta: Any, children: list[Token]) -> TargetReps:
        line = _line(meta)
        if len(children) != 3:
            raise StructuralError(
                FieldKind.TARGET, line, f"expected 3 numbers, got {len(children)}"
            )
        sets_count, min_reps, max_reps = (to_uint(tok) for tok in children)
        if self.strict_target_range and min_reps > max_reps:
            raise TargetRangeError(min_reps, max_reps, line)
        return TargetReps(sets_count=sets_count, min_reps=min_reps, max_reps=max_reps)

    @v_args(meta=True)
    def attempt(self, meta: Any, children: list[Token]) -> Attempt:
        if len(children) != 2:
            raise StructuralError(
                FieldKind.SET_GROUP,
                _line(meta),
                f"attempt needs weight and reps, got {len(children)} values",
            )
        weight, reps = (to_uint(tok) for tok in children)
        return Attempt(weight=weight, reps=reps)

    @v_args(meta=True)
    def set(self, meta: Any, children: list[Any]) -> Set:
        if not children or not all(isinstance(c, Attempt) for c in children):
            raise StructuralError(FieldKind.SET_GROUP, _line(meta), "malformed set")
        return Set(attempts=tuple(children))

    @v_args(meta=True)
    def set_group(self, meta: Any, children: list[Any]) -> tuple[Set, ...]:
        if not all(isinstance(c, Set) for c in children):
            raise StructuralError(FieldKind.SET_GROUP, _line(meta), "malformed set group")
        return tuple(children)

    @v_args(meta=True)
    def record(self, meta: Any, children: list[Any]) -> ExerciseRecord:
        line = _line(meta)
        date: dt.date | None = None
        exercise_name: str | None = None
        target: TargetReps | None = None
        sets: tuple[Set, ...] = ()

        for field in children:
            if isinstance(field, dt.date):
                date = field
            elif isinstance(field, str):
                exercise_name = field
            elif isinstance(field, TargetReps):
                target = field
            elif isinstance(field, tuple):
                sets = field

        if date is None:
            raise StructuralError(FieldKind.DATE, line)
        if exercise_name is None:
            raise StructuralError(FieldKind.EXERCISE_NAME, line)
        if target is None:
            raise StructuralError(FieldKind.TARGET, line)

        return ExerciseRecord(date=date, exercise_name=exercise_name, target=target, sets=sets)


def translate_record(node: Tree, *, strict_target_range: bool = False) -> ExerciseRecord:
    """
    Convert one ``record`` node into an ``ExerciseRecord``.

    Raises the first ``GymLogParserError`` met while walking the node.
    """
    if not isinstance(node, Tree) or node.data != "record":
        raise StructuralError(FieldKind.FILE_CONTENT, _line(getattr(node, "meta", None)))
    try:
        return RecordTransformer(strict_target_range).transform(node)
    except VisitError as e:
        if isinstance(e.orig_exc, GymLogParserError):
            logger.debug("Record translation failed: %s", e.orig_exc)
            raise e.orig_exc from None
        raise


def translate(tree: Tree, *, strict_target_range: bool = False) -> list[ExerciseRecord]:
    """Convert a whole-file parse tree into records, in input order."""
    if not isinstance(tree, Tree) or tree.data != "start":
        raise StructuralError(FieldKind.FILE_CONTENT)
    records = [
        translate_record(child, strict_target_range=strict_target_range)
        for child in tree.children
        if isinstance(child, Tree) and child.data == "record"
    ]
    if not records:
        raise StructuralError(FieldKind.FILE_CONTENT, detail="no records found")
    return records
