from __future__ import annotations

import pytest

from column_detector import CodeColumnNotFound, detect_code_column


def test_detects_single_numeric_column() -> None:
    assert detect_code_column(["字|abc|def|x|x|x|x|x|x|9999"]) == 9


def test_first_matching_line_wins() -> None:
    lines = [
        "short|1234",
        "a|b|c|d|e|f",
        "a|b|12345|d|e",
        "a|b|c|6789|e",
    ]
    assert detect_code_column(lines) == 2


def test_short_rows_are_not_sampled() -> None:
    with pytest.raises(CodeColumnNotFound):
        detect_code_column(["a|1234|c|d"])


def test_lengths_outside_four_or_five_do_not_match() -> None:
    lines = ["a|123|c|d|e", "a|b|123456|d|e", "a|b|c|12a4|e"]
    with pytest.raises(CodeColumnNotFound):
        detect_code_column(lines)


def test_only_sample_is_examined() -> None:
    lines = ["a|b|c|d|e"] * 50 + ["a|b|c|d|1234"]
    with pytest.raises(CodeColumnNotFound):
        detect_code_column(lines)
    assert detect_code_column(lines, sample_size=51) == 4


def test_custom_delimiter() -> None:
    assert detect_code_column(["a\tb\tc\t0040\te"], delimiter="\t") == 3


def test_failure_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="Four Corner Code column"):
        detect_code_column([])
