import logging
from pathlib import Path
from typing import List, Union

import PyPDF2
import pdfplumber

from pdf_highlights.backends.pdfplumber_backend import read_page_fragments
from pdf_highlights.backends.pypdf2_backend import read_page_annotations
from pdf_highlights.core.errors import DocumentDecodeError, PageRetrievalError
from pdf_highlights.core.types import HighlightAnnotation, TextFragment

logger = logging.getLogger(__name__)

_backends_configured = False


def configure_backends(log_level: int = logging.WARNING) -> None:
    """One-time, process-wide setup of the PDF libraries.

    pdfminer (under pdfplumber) and PyPDF2 log every recoverable syntax
    oddity; keep them at `log_level` so they don't drown our own output.
    """
    global _backends_configured
    for name in ("pdfminer", "PyPDF2"):
        logging.getLogger(name).setLevel(log_level)
    _backends_configured = True


class PdfDocument:
    """A PDF opened with PyPDF2 (annotations) and pdfplumber (text fragments).

    Page numbers are one-based. Use as a context manager; both underlying
    handles are closed on exit.
    """

    def __init__(self, pdf_path: Union[str, Path]):
        self.path = Path(pdf_path)
        self._file = None
        self._reader = None
        self._pdf = None
        self.page_count = 0

    def open(self) -> "PdfDocument":
        if not _backends_configured:
            configure_backends()
        try:
            self._file = open(self.path, "rb")
            self._reader = PyPDF2.PdfReader(self._file)
            self._pdf = pdfplumber.open(self.path)
            self.page_count = len(self._reader.pages)
        except Exception as e:
            logger.error(f"Could not open {self.path}: {e}")
            self.close()
            raise DocumentDecodeError(self.path, str(e)) from e
        return self

    def close(self) -> None:
        if self._pdf is not None:
            self._pdf.close()
            self._pdf = None
        if self._file is not None:
            self._file.close()
            self._file = None
        self._reader = None

    def __enter__(self) -> "PdfDocument":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_page(self, page_number: int) -> None:
        if self._reader is None:
            raise PageRetrievalError(page_number, "document is not open")
        if not 1 <= page_number <= self.page_count:
            raise PageRetrievalError(page_number, f"out of range (1-{self.page_count})")

    def get_annotations(self, page_number: int) -> List[HighlightAnnotation]:
        self._check_page(page_number)
        try:
            return read_page_annotations(self._reader.pages[page_number - 1])
        except Exception as e:
            raise PageRetrievalError(page_number, f"annotations unreadable: {e}") from e

    def get_text_fragments(self, page_number: int) -> List[TextFragment]:
        self._check_page(page_number)
        try:
            return read_page_fragments(self._pdf.pages[page_number - 1])
        except Exception as e:
            raise PageRetrievalError(page_number, f"text content unreadable: {e}") from e
