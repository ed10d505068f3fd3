import logging
from typing import Any, List, Mapping, Optional

from pdf_highlights.core.types import AnnotationKind, Color, HighlightAnnotation, Rect

logger = logging.getLogger(__name__)


def _resolve(obj):
    # Entries of /Annots are usually IndirectObjects
    return obj.get_object() if hasattr(obj, "get_object") else obj


def _name(value) -> Optional[str]:
    if value is None:
        return None
    return str(value).lstrip("/")


def _rect(obj: Mapping[str, Any]) -> Rect:
    rect = _resolve(obj.get("/Rect", [])) or []
    if len(rect) < 4:
        nan = float("nan")
        return (nan, nan, nan, nan)
    return (float(rect[0]), float(rect[1]), float(rect[2]), float(rect[3]))


def _embedded_text(obj: Mapping[str, Any]) -> Optional[str]:
    contents = obj.get("/Contents")
    if contents is None:
        return None
    return str(contents)


def _color(obj: Mapping[str, Any]) -> Optional[Color]:
    color = obj.get("/C")
    if color is None:
        return None
    color = _resolve(color)
    if not color:
        return None
    return tuple(float(c) for c in color)


def annotation_from_pdf_object(obj: Mapping[str, Any]) -> HighlightAnnotation:
    """Decode one annotation dictionary into a HighlightAnnotation.

    The kind is resolved here from `/Subtype` (or a producer-specific
    `/Type`) so the correlator never inspects raw field names. Missing or
    short `/Rect` arrays become NaN geometry, which matches nothing.
    """
    obj = _resolve(obj)
    kind = AnnotationKind.resolve(_name(obj.get("/Subtype")), _name(obj.get("/Type")))
    return HighlightAnnotation(
        kind=kind,
        rect=_rect(obj),
        embedded_text=_embedded_text(obj),
        color=_color(obj),
    )


def read_page_annotations(page) -> List[HighlightAnnotation]:
    """All annotations of a PyPDF2 page, in the order of its /Annots array."""
    if "/Annots" not in page:
        return []
    annots = _resolve(page["/Annots"]) or []
    return [annotation_from_pdf_object(annot) for annot in annots]
