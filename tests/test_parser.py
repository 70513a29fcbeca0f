from datetime import date

import pytest
from pydantic import ValidationError

from gym_log_parser import (
    DateParseError,
    ExerciseRecord,
    LogReadError,
    LogSyntaxError,
    TargetRangeError,
    parse_exercise_log,
    parse_exercise_log_file,
)

LINE = "05.08.2024 / bench press / (3 x 10-15) / 100-10,90-10"


def parse_single_record(text: str) -> ExerciseRecord:
    records = parse_exercise_log(text)
    assert len(records) == 1
    return records[0]


def test_parse_date():
    record = parse_single_record(LINE)
    assert record.date == date(2024, 8, 5)


def test_parse_exercise_name():
    record = parse_single_record(LINE)
    assert record.exercise_name == "bench press"


def test_parse_target():
    record = parse_single_record(LINE)
    assert record.target.sets_count == 3
    assert record.target.min_reps == 10
    assert record.target.max_reps == 15


def test_parse_target_with_reps_word():
    record = parse_single_record("05.08.2024 / bench press / (3 x 10-15 reps) / 100-10")
    assert (record.target.sets_count, record.target.min_reps, record.target.max_reps) == (3, 10, 15)


def test_parse_set_group():
    record = parse_single_record("05.08.2024 / bench press / (3 x 10-15) / 100-10,90-10;80-12")
    assert len(record.sets) == 2
    assert len(record.sets[0].attempts) == 2
    assert len(record.sets[1].attempts) == 1

    assert record.sets[0].attempts[0].weight == 100
    assert record.sets[0].attempts[0].reps == 10
    assert record.sets[0].attempts[1].weight == 90
    assert record.sets[0].attempts[1].reps == 10
    assert record.sets[1].attempts[0].weight == 80
    assert record.sets[1].attempts[0].reps == 12


def test_parse_attempt():
    record = parse_single_record("05.08.2024 / bench press / (3 x 10-15) / 120-8,110-8")
    assert [(a.weight, a.reps) for a in record.sets[0].attempts] == [(120, 8), (110, 8)]


def test_parse_multiple_records():
    text = (
        "05.08.2024 / bench press / (3 x 10-15) / 100-10,90-10;80-12\n"
        "06.08.2024 / squat / (4 x 8-12) / 140-10,130-10"
    )
    records = parse_exercise_log(text)

    assert len(records) == 2
    assert records[0].date == date(2024, 8, 5)
    assert records[0].exercise_name == "bench press"
    assert (records[0].target.sets_count, records[0].target.min_reps, records[0].target.max_reps) == (3, 10, 15)
    assert records[1].date == date(2024, 8, 6)
    assert records[1].exercise_name == "squat"
    assert (records[1].target.sets_count, records[1].target.min_reps, records[1].target.max_reps) == (4, 8, 12)


def test_records_keep_input_order_and_duplicates():
    text = "\n".join(
        [
            "07.08.2024 / row / (3 x 8-10) / 60-10",
            "05.08.2024 / row / (3 x 8-10) / 60-10",
            "05.08.2024 / row / (3 x 8-10) / 60-10",
        ]
    )
    records = parse_exercise_log(text)
    assert [r.date.day for r in records] == [7, 5, 5]


def test_blank_lines_and_trailing_newline_are_tolerated():
    text = "\n05.08.2024 / bench press / (3 x 10-15) / 100-10\n\n\r\n06.08.2024 / squat / (4 x 8-12) / 140-10\n"
    records = parse_exercise_log(text)
    assert [r.exercise_name for r in records] == ["bench press", "squat"]


def test_trailing_whitespace_at_end_of_file():
    record = parse_single_record(LINE + "   ")
    assert record.sets[0].attempts[1].reps == 10


def test_whitespace_handling():
    record = parse_single_record("05.08.2024 / bench press / (3 x 10-15) / 100-10 , 90-10 ; 80-12")
    assert record.sets[0].attempts[0].weight == 100
    assert record.sets[0].attempts[0].reps == 10
    assert record.sets[1].attempts[0].weight == 80
    assert record.sets[1].attempts[0].reps == 12


def test_spaced_and_unspaced_set_groups_match():
    spaced = parse_single_record("05.08.2024 / dips / (3 x 10-15) / 20 - 10 , 10 - 12 ; 0 - 15")
    compact = parse_single_record("05.08.2024 / dips / (3 x 10-15) / 20-10,10-12;0-15")
    assert spaced.sets == compact.sets


def test_records_are_immutable():
    record = parse_single_record(LINE)
    with pytest.raises(ValidationError):
        record.exercise_name = "squat"  # type: ignore[misc]


def test_parse_empty_file():
    with pytest.raises(LogSyntaxError):
        parse_exercise_log("")


def test_invalid_date_format():
    with pytest.raises(LogSyntaxError):
        parse_exercise_log("2024-08-05 / bench press / (3 x 10-15) / 100-10,90-10")


def test_invalid_calendar_date():
    with pytest.raises(DateParseError) as exc:
        parse_exercise_log("31.04.2024 / bench press / (3 x 10-15) / 100-10")
    assert exc.value.text == "31.04.2024"
    assert exc.value.line == 1


def test_invalid_target_format():
    with pytest.raises(LogSyntaxError):
        parse_exercise_log("05.08.2024 / bench press / 3x10-15 / 100-10,90-10")


def test_invalid_set_format():
    with pytest.raises(LogSyntaxError):
        parse_exercise_log("05.08.2024 / bench press / (3 x 10-15) / 100-10-5")


def test_missing_field_fails():
    with pytest.raises(LogSyntaxError):
        parse_exercise_log("05.08.2024 / bench press / (3 x 10-15)")


def test_error_in_later_line_fails_whole_file():
    text = LINE + "\n06.08.2024 / squat / (4 x 8-12) / 140-10-5"
    with pytest.raises(LogSyntaxError) as exc:
        parse_exercise_log(text)
    assert exc.value.line == 2


def test_min_above_max_is_accepted_by_default():
    record = parse_single_record("05.08.2024 / curl / (3 x 15-10) / 20-12")
    assert record.target.min_reps == 15
    assert record.target.max_reps == 10


def test_min_above_max_rejected_in_strict_mode():
    with pytest.raises(TargetRangeError):
        parse_exercise_log("05.08.2024 / curl / (3 x 15-10) / 20-12", strict_target_range=True)


def test_parse_exercise_log_file(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text(LINE + "\n", encoding="utf-8")
    records = parse_exercise_log_file(path)
    assert records[0].exercise_name == "bench press"


def test_parse_exercise_log_file_missing(tmp_path):
    with pytest.raises(LogReadError) as exc:
        parse_exercise_log_file(tmp_path / "missing.txt")
    assert exc.value.path == tmp_path / "missing.txt"
