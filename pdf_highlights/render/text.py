from pathlib import Path
from typing import Union

from pdf_highlights.core.types import ExtractionResult

ENTRY_SEPARATOR = "\n\n---\n\n"


def export_file_name(source_name: Union[str, Path], extension: str) -> str:
    """`report.pdf` -> `report_highlights.txt` for extension "txt"."""
    stem = Path(source_name).name
    if stem.lower().endswith(".pdf"):
        stem = stem[:-4]
    return f"{stem}_highlights.{extension.lstrip('.')}"


def render_plain_text(result: ExtractionResult, title: str) -> str:
    """Title line, then one `[Page N] text` entry per highlight."""
    body = ENTRY_SEPARATOR.join(f"[Page {h.page}] {h.text}" for h in result.highlights)
    return f"EXTRACTED HIGHLIGHTS: {title}\n\n{body}"


def render_clipboard_text(result: ExtractionResult) -> str:
    return "\n\n".join(h.text for h in result.highlights)
