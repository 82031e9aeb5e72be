from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict
import os

from data_source import DEFAULT_DATA_URL

# every field can be overridden by SIJIAO_<FIELD>; load_settings keywords win over env
ENV_PREFIX = "SIJIAO_"

@dataclass
class AppSettings:
    data_url: str = DEFAULT_DATA_URL
    delimiter: str = "|"
    sample_size: int = 50
    min_columns: int = 5
    max_query_length: int = 5
    max_results: int = 100
    fetch_timeout: float = 30.0
    log_level: str = "INFO"

def _coerce(name: str, kind: type, raw: str) -> Any:
    if kind is str: return raw
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}") from None

def load_settings(**overrides) -> AppSettings:
    types = {"str": str, "int": int, "float": float}
    values: Dict[str, Any] = {}
    for f in fields(AppSettings):
        raw = os.getenv(ENV_PREFIX + f.name.upper())
        if raw is not None:
            kind = types[f.type] if isinstance(f.type, str) else f.type
            values[f.name] = _coerce(f.name, kind, raw)
    values.update(overrides)
    return AppSettings(**values)
