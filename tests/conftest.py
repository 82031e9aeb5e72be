from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make app modules importable when running tests from the repo root.
MOD_DIR = Path(__file__).resolve().parents[1] / "app" / "modules"
if str(MOD_DIR) not in sys.path:
    sys.path.insert(0, str(MOD_DIR))

from record_parser import CharRecord  # noqa: E402


def make_row(char: str, code: str, definition: str = "def", pinyin: str = "pin",
             cantonese: str = "jyut") -> str:
    cols = [char, cantonese, definition, "x", "x", "x", "x", "x", "x", pinyin, code]
    return "|".join(cols)


@pytest.fixture
def record_factory():
    def _make(code: str, char: str = "字") -> CharRecord:
        return CharRecord(character=char, code=code, definition="d", pinyin="p")
    return _make
