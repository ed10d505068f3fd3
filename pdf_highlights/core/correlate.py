import logging
from collections import Counter
from typing import Iterable, List, Sequence

from pdf_highlights.core.assemble import assemble
from pdf_highlights.core.bbox import overlaps
from pdf_highlights.core.types import (
    AnnotationKind,
    ExtractedHighlight,
    HighlightAnnotation,
    TextFragment,
)

logger = logging.getLogger(__name__)

FALLBACK_TEXT = "Highlight detected (Text unreadable or hidden)"

SOURCE_EMBEDDED = "embedded"
SOURCE_SPATIAL = "spatial"
SOURCE_FALLBACK = "fallback"


def _readable_fragments(fragments: Iterable[TextFragment]) -> List[TextFragment]:
    return [f for f in fragments if f.content and f.content.strip()]


def text_under_rect(rect: Sequence[float], fragments: Sequence[TextFragment]) -> str:
    """Text of every fragment overlapping `rect`, kept in the parser's order."""
    matched = [f.content for f in fragments if overlaps(rect, f.bbox)]
    return assemble(matched)


def correlate_annotation(
    annotation: HighlightAnnotation,
    fragments: Sequence[TextFragment],
    page_number: int,
) -> ExtractedHighlight:
    embedded = annotation.embedded_text
    if embedded and embedded.strip():
        return ExtractedHighlight(embedded, page_number, annotation.color, SOURCE_EMBEDDED)

    text = text_under_rect(annotation.rect, fragments)
    if text:
        return ExtractedHighlight(text, page_number, annotation.color, SOURCE_SPATIAL)
    return ExtractedHighlight(FALLBACK_TEXT, page_number, annotation.color, SOURCE_FALLBACK)


def correlate_page(
    annotations: Sequence[HighlightAnnotation],
    fragments: Sequence[TextFragment],
    page_number: int,
) -> List[ExtractedHighlight]:
    """Produce one ExtractedHighlight per highlight annotation, in annotation order.

    Non-highlight annotations are ignored. Embedded annotation text wins over
    spatial matching; when neither yields text the fallback sentinel is used,
    so no highlight mark is ever dropped.
    """
    readable = _readable_fragments(fragments)
    out: List[ExtractedHighlight] = []
    for annotation in annotations:
        if annotation.kind is not AnnotationKind.HIGHLIGHT:
            continue
        out.append(correlate_annotation(annotation, readable, page_number))

    if out:
        counts = Counter(h.source for h in out)
        logger.debug(
            f"Page {page_number}: {len(out)} highlights "
            f"(embedded={counts[SOURCE_EMBEDDED]}, spatial={counts[SOURCE_SPATIAL]}, "
            f"fallback={counts[SOURCE_FALLBACK]})"
        )
    return out
