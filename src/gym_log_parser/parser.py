"""
Public entry points: text or file in, exercise records out.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import SETTINGS
from .errors import LogReadError
from .grammar import parse_tree
from .models import ExerciseRecord
from .translator import translate

logger = logging.getLogger(__name__)


def parse_exercise_log(
    text: str, *, strict_target_range: bool | None = None
) -> list[ExerciseRecord]:
    """
    Parse the full text of an exercise log.

    Records come back in input order. The first syntax or semantic error aborts
    the whole parse; there is no partial result.

    Args:
        text: Log file contents, one record per line
        strict_target_range: Reject targets with min reps above max reps.
            Defaults to the FF_STRICT_TARGET_RANGE setting.

    Returns:
        List of parsed records
    """
    if strict_target_range is None:
        strict_target_range = SETTINGS.FF_STRICT_TARGET_RANGE
    logger.debug("Parsing exercise log: %d chars, strict=%s", len(text), strict_target_range)
    tree = parse_tree(text)
    records = translate(tree, strict_target_range=strict_target_range)
    logger.debug("Parsed %d records", len(records))
    return records


def parse_exercise_log_file(
    path: str | Path,
    *,
    encoding: str | None = None,
    strict_target_range: bool | None = None,
) -> list[ExerciseRecord]:
    """Read a log file from disk and parse it."""
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding or SETTINGS.LOG_FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise LogReadError(path, str(e)) from e
    logger.debug("Read %s", path)
    return parse_exercise_log(text, strict_target_range=strict_target_range)
