import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union

from pdf_highlights.backends.document import PdfDocument
from pdf_highlights.core.correlate import correlate_page
from pdf_highlights.core.errors import PageRetrievalError
from pdf_highlights.core.page_range import parse_page_range
from pdf_highlights.core.types import (
    AnnotationKind,
    ExtractionResult,
    HighlightAnnotation,
    TextFragment,
)

logger = logging.getLogger(__name__)


class PageErrorPolicy(str, Enum):
    ABORT = "abort"  # first unreadable page fails the whole document
    SKIP = "skip"    # unreadable pages are logged and left out of the result


class PageSource(Protocol):
    """Per-page access to already-decoded annotations and text fragments (1-based pages)."""

    page_count: int

    def get_annotations(self, page_number: int) -> List[HighlightAnnotation]:
        ...

    def get_text_fragments(self, page_number: int) -> List[TextFragment]:
        ...


def extract_highlights(
    document: PageSource,
    pages: Optional[Iterable[int]] = None,
    on_page_error: Union[PageErrorPolicy, str] = PageErrorPolicy.ABORT,
) -> ExtractionResult:
    """Walk the document's pages in ascending order and collect highlight text.

    Results keep page order, then the annotation order the parser reported
    for each page. Pages without highlights contribute nothing. A
    `PageRetrievalError` aborts the walk under `ABORT`; under `SKIP` the page
    is recorded in `skipped_pages` and the walk continues.
    """
    policy = PageErrorPolicy(on_page_error)
    if pages is None:
        page_numbers = list(range(1, document.page_count + 1))
    else:
        page_numbers = sorted(set(pages))

    result = ExtractionResult()
    for page_number in page_numbers:
        try:
            annotations = document.get_annotations(page_number)
            if any(a.kind is AnnotationKind.HIGHLIGHT for a in annotations):
                fragments = document.get_text_fragments(page_number)
                result.highlights.extend(correlate_page(annotations, fragments, page_number))
        except PageRetrievalError as e:
            if policy is PageErrorPolicy.ABORT:
                logger.error(f"Aborting extraction: {e}")
                raise
            logger.warning(f"Skipping page {page_number}: {e.reason}")
            result.skipped_pages.append(page_number)
            continue
        result.pages_scanned += 1

    logger.info(result.summary)
    return result


def extract_highlights_from_file(
    pdf_path: Union[str, Path],
    page_range: Optional[str] = None,
    on_page_error: Union[PageErrorPolicy, str] = PageErrorPolicy.ABORT,
) -> ExtractionResult:
    """Open `pdf_path` with the PDF backends and walk the selected pages."""
    with PdfDocument(pdf_path) as document:
        pages = parse_page_range(document.page_count, page_range)
        return extract_highlights(document, pages, on_page_error)
