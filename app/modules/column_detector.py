from __future__ import annotations
from typing import Sequence
import logging
import re

logger = logging.getLogger(__name__)

CODE_COLUMN_RE = re.compile(r"[0-9]{4,5}")

class CodeColumnNotFound(ValueError):
    pass

def detect_code_column(lines: Sequence[str], delimiter: str = "|",
                       sample_size: int = 50, min_columns: int = 5) -> int:
    """Return the index of the first column holding a 4-5 digit code.

    Only the first ``sample_size`` lines are examined and rows shorter than
    ``min_columns`` are ignored. The first matching line/column pair wins.
    """
    for n, line in enumerate(lines[:sample_size]):
        cols = line.split(delimiter)
        if len(cols) < min_columns: continue
        for j, val in enumerate(cols):
            if CODE_COLUMN_RE.fullmatch(val):
                logger.info("Code column %d detected on line %d", j, n + 1)
                return j
    raise CodeColumnNotFound(
        "Could not automatically detect the Four Corner Code column "
        f"in the first {min(sample_size, len(lines))} lines (delimiter {delimiter!r}).")
