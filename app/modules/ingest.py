from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import logging

from code_trie import CodeTrie
from column_detector import CodeColumnNotFound, detect_code_column
from record_parser import DEFAULT_FIELDS, FieldMap, parse_record

logger = logging.getLogger(__name__)

MANUAL_UPLOAD_HINT = "Please download the CSV manually and upload it below."

class IngestState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"

@dataclass
class IngestResult:
    state: IngestState
    index: Optional[CodeTrie] = None
    count: int = 0
    error: Optional[str] = None

    @property
    def needs_manual_input(self) -> bool:
        return self.state is IngestState.FAILED

    @classmethod
    def failed(cls, message: str) -> "IngestResult":
        return cls(state=IngestState.FAILED, error=message)

def build_index(text: str, delimiter: str = "|", fields: FieldMap = DEFAULT_FIELDS,
                sample_size: int = 50, min_columns: int = 5) -> Tuple[CodeTrie, int]:
    # rows end at "\n" only; other line-break characters may appear inside fields
    lines = text.split("\n")
    code_index = detect_code_column([l.rstrip("\r") for l in lines], delimiter, sample_size=sample_size, min_columns=min_columns)
    trie = CodeTrie()
    count = skipped = 0
    for raw in lines:
        line = raw.strip()
        if not line: continue
        rec = parse_record(line, delimiter, code_index, fields)
        if rec is None:
            skipped += 1; continue
        trie.insert(rec.code, rec)
        count += 1
    logger.debug("Skipped %d rows that failed validation", skipped)
    return trie, count

class IngestionPipeline:
    """One-shot parse of a raw dataset into a fresh CodeTrie."""

    def __init__(self, delimiter: str = "|", fields: FieldMap = DEFAULT_FIELDS,
                 sample_size: int = 50, min_columns: int = 5):
        self.delimiter = delimiter
        self.fields = fields
        self.sample_size = sample_size
        self.min_columns = min_columns
        self.state = IngestState.IDLE

    def run(self, text: str) -> IngestResult:
        self.state = IngestState.LOADING
        try:
            trie, count = build_index(text, self.delimiter, self.fields,
                                      sample_size=self.sample_size, min_columns=self.min_columns)
        except CodeColumnNotFound as e:
            logger.warning("Ingestion failed: %s", e)
            result = IngestResult.failed(f"{e} {MANUAL_UPLOAD_HINT}")
        except Exception as e:
            logger.exception("Unexpected error while parsing dataset")
            result = IngestResult.failed(f"Failed to process data: {str(e) or type(e).__name__}. {MANUAL_UPLOAD_HINT}")
        else:
            logger.info("Dataset loaded: %d characters", count)
            result = IngestResult(state=IngestState.READY, index=trie, count=count)
        self.state = result.state
        return result
