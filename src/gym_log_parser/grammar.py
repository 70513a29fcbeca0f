"""
Lark grammar for the exercise log format.

A log file is one record per line::

    05.08.2024 / bench press / (3 x 10-15 reps) / 100-10,90-10;80-12

Separator terminals absorb the spaces around them so the exercise name can
contain free text without a global ``%ignore``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from .errors import LogSyntaxError

logger = logging.getLogger(__name__)

GRAMMAR = r"""
start: _NL? record (_NL record)* (_NL | _TRAILING_WS)?

record: date _SLASH exercise_name _SLASH target _SLASH set_group

date: DATE
exercise_name: NAME
target: _LPAR INT _X INT _DASH INT _REPS? _RPAR
set_group: set (_SEMI set)*
set: attempt (_COMMA attempt)*
attempt: INT _DASH INT

DATE: /[ \t]*[0-9]{2}\.[0-9]{2}\.[0-9]{4}/
NAME: /[^\/\n]+/
INT: /[0-9]+/

_SLASH: /[ \t]*\/[ \t]*/
_LPAR: /\([ \t]*/
_RPAR: /[ \t]*\)/
_X: /[ \t]*[xX][ \t]*/
_DASH: /[ \t]*-[ \t]*/
_REPS: /[ \t]*reps/i
_COMMA: /[ \t]*,[ \t]*/
_SEMI: /[ \t]*;[ \t]*/
_NL: /[ \t]*(\r?\n[ \t]*)+/
_TRAILING_WS: /[ \t]+\Z/
"""

# Terminal names as shown to users in syntax errors.
EXPECTED_NAMES = {
    "DATE": "date (DD.MM.YYYY)",
    "NAME": "exercise name",
    "INT": "number",
    "_SLASH": "'/'",
    "_LPAR": "'('",
    "_RPAR": "')'",
    "_X": "'x'",
    "_DASH": "'-'",
    "_REPS": "'reps'",
    "_COMMA": "','",
    "_SEMI": "';'",
    "_NL": "newline",
    "_TRAILING_WS": "end of input",
    "$END": "end of input",
}


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    """Build the LALR parser once; the instance is read-only afterwards."""
    logger.debug("Compiling exercise log grammar")
    return Lark(GRAMMAR, start="start", parser="lalr", propagate_positions=True)


def _context(text: str, line: int | None, column: int | None) -> str:
    if line is None or column is None:
        return ""
    # lark counts lines on "\n" only
    lines = text.split("\n")
    if not 0 < line <= len(lines):
        return ""
    source = lines[line - 1].rstrip("\r")
    return f"{source}\n{' ' * (column - 1)}^"


def _position(value: object) -> int | None:
    # lark reports -1 or "?" when it has no position
    if isinstance(value, int) and value > 0:
        return value
    return None


def syntax_error_from_lark(exc: UnexpectedInput, text: str) -> LogSyntaxError:
    """Translate a lark ``UnexpectedInput`` into a ``LogSyntaxError``."""
    line = _position(getattr(exc, "line", None))
    column = _position(getattr(exc, "column", None)) if line is not None else None
    raw = getattr(exc, "expected", None) or getattr(exc, "allowed", None) or ()
    expected = {EXPECTED_NAMES.get(name, name) for name in raw}
    return LogSyntaxError(line, column, expected, _context(text, line, column))


def parse_tree(text: str) -> Tree:
    """
    Parse a whole log file into a lark parse tree.

    Raises:
        LogSyntaxError: the text does not match the grammar anywhere in the file.
    """
    try:
        return get_parser().parse(text)
    except UnexpectedInput as e:
        err = syntax_error_from_lark(e, text)
        logger.debug("Syntax error: %s", err)
        raise err from e
