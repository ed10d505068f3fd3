import math
from typing import Sequence

from pdf_highlights.core.types import Rect

# --- Coordinate helpers ---

def plumber_to_pdf_y(page_height: float, y_plumber: float) -> float:
    """Convert pdfplumber Y (origin top-left, y down) to
    PDF user-space Y (origin bottom-left, y up)."""
    return float(page_height) - float(y_plumber)


def normalize_rect(rect: Sequence[float]) -> Rect:
    x1, y1, x2, y2 = rect[:4]
    return (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


# --- Overlap test ---

def overlaps(annotation_rect: Sequence[float], fragment_box: Sequence[float]) -> bool:
    """True if the (possibly unnormalized) annotation rect intersects the fragment box.

    Strict comparisons: rectangles that only share an edge do not overlap.
    No tolerance is applied, and NaN coordinates never overlap anything.
    """
    if any(math.isnan(v) for v in annotation_rect[:4]):
        return False
    min_x, min_y, max_x, max_y = normalize_rect(annotation_rect)
    f_x0, f_y0, f_x1, f_y1 = fragment_box
    return min_x < f_x1 and max_x > f_x0 and min_y < f_y1 and max_y > f_y0
