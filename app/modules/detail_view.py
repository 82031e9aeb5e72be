from __future__ import annotations
from typing import List
import html

from record_parser import CharRecord

def glyph_html(rec: CharRecord) -> str:
    return f"<div style='font-size:6rem;text-align:center'>{html.escape(rec.character)}</div>"

def detail_lines(rec: CharRecord) -> List[str]:
    # plain text only; dataset values are never rendered as markup
    lines = [f"Mandarin: {rec.pinyin}"]
    if rec.cantonese: lines.append(f"Cantonese: {rec.cantonese}")
    lines.append(f"Four Corner Code: {rec.code}")
    lines.append(rec.definition or "No definition available.")
    return lines
