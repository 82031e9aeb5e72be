from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional
import re

CODE_RE = re.compile(r"[0-9]+")

@dataclass(frozen=True)
class CharRecord:
    character: str
    code: str
    definition: str
    pinyin: str
    cantonese: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

@dataclass(frozen=True)
class FieldMap:
    """Column positions of the named fields in a Unihan reference row."""
    character: int = 0
    cantonese: int = 1
    definition: int = 2
    pinyin: int = 9

DEFAULT_FIELDS = FieldMap()

def _col(cols: List[str], idx: int) -> str:
    return cols[idx] if 0 <= idx < len(cols) else ""

def parse_record(line: str, delimiter: str, code_index: int,
                 fields: FieldMap = DEFAULT_FIELDS) -> Optional[CharRecord]:
    cols = line.split(delimiter)
    char = _col(cols, fields.character)
    code = _col(cols, code_index)
    definition = _col(cols, fields.definition)
    pinyin = _col(cols, fields.pinyin)
    if not (char and code and definition and pinyin): return None
    # any digit count is accepted here; detection alone is limited to 4-5
    if not CODE_RE.fullmatch(code): return None
    return CharRecord(character=char, code=code, definition=definition,
                      pinyin=pinyin, cantonese=_col(cols, fields.cantonese))
