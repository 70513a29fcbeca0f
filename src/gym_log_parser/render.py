"""
Rendering of parsed records for terminal output.
"""

import json
from collections.abc import Iterable

from .models import ExerciseRecord, Set


def _render_set(index: int, workout_set: Set) -> str:
    attempts = ", ".join(f"{a.weight} kg x {a.reps}" for a in workout_set.attempts)
    return f"  set {index}: {attempts}"


def render_records(records: Iterable[ExerciseRecord]) -> str:
    """Render records as a readable summary, one block per record."""
    blocks: list[str] = []
    for record in records:
        t = record.target
        lines = [
            f"{record.date.isoformat()}  {record.exercise_name}  "
            f"{t.sets_count} x {t.min_reps}-{t.max_reps}"
        ]
        if record.sets:
            lines.extend(_render_set(i, s) for i, s in enumerate(record.sets, start=1))
        else:
            lines.append("  (no sets)")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_records_json(records: Iterable[ExerciseRecord]) -> str:
    """Render records as an indented JSON array."""
    return json.dumps([r.model_dump(mode="json") for r in records], indent=2)
