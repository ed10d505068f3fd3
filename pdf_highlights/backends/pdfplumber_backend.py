from typing import Dict, Iterable, List

from pdf_highlights.core.bbox import plumber_to_pdf_y
from pdf_highlights.core.types import TextFragment


def fragment_from_word(word: Dict, page_height: float) -> TextFragment:
    """Convert a pdfplumber word (top-left origin) into a PDF user-space fragment.

    The fragment's origin is its lower-left corner, so its box spans
    [x0, page_height - bottom, x1, page_height - top]. pdfplumber's x0 and
    `page_height - bottom` are already raw user space, whatever the media
    box origin, which is where annotation /Rect values live.
    """
    x0, x1 = float(word["x0"]), float(word["x1"])
    top, bottom = float(word["top"]), float(word["bottom"])
    return TextFragment(
        content=str(word["text"]),
        origin=(x0, plumber_to_pdf_y(page_height, bottom)),
        width=x1 - x0,
        height=bottom - top,
    )


def fragments_from_words(words: Iterable[Dict], page_height: float) -> List[TextFragment]:
    return [
        fragment_from_word(w, page_height)
        for w in words
        if w.get("text") and str(w["text"]).strip()
    ]


def read_page_fragments(pl_page) -> List[TextFragment]:
    """Text fragments of a pdfplumber page, in pdfplumber's reading order."""
    words = pl_page.extract_words(keep_blank_chars=False, use_text_flow=True) or []
    return fragments_from_words(words, float(pl_page.height))
