import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from pdf_highlights.core.types import ExtractionResult

logger = logging.getLogger(__name__)

TITLE_COLOR = colors.HexColor("#334155")
SOURCE_COLOR = colors.HexColor("#64748b")
LABEL_COLOR = colors.HexColor("#6366f1")
BODY_COLOR = colors.HexColor("#334155")


@dataclass
class PdfLayout:
    """Page geometry for the highlights report.

    Vertical positions are offsets from the top edge of the page. A new page
    starts before a label once the offset passes `label_break`, and before a
    text block that would end below `block_break`.
    """
    page_size: Tuple[float, float] = A4
    margin: float = 20 * mm
    top: float = 20 * mm
    title_font_size: float = 18
    source_font_size: float = 10
    label_font_size: float = 9
    body_font_size: float = 11
    line_height: float = 6 * mm
    label_gap: float = 6 * mm
    entry_gap: float = 12 * mm
    label_break: float = 270 * mm
    block_break: float = 280 * mm
    font: str = "Helvetica"
    bold_font: str = "Helvetica-Bold"
    # TrueType fonts for scripts Helvetica can't draw (e.g. Greek, Cyrillic)
    font_path: Optional[str] = None
    bold_font_path: Optional[str] = None

    @property
    def content_width(self) -> float:
        return self.page_size[0] - 2 * self.margin


def _register_fonts(layout: PdfLayout) -> Tuple[str, str]:
    font, bold = layout.font, layout.bold_font
    if layout.font_path:
        try:
            pdfmetrics.registerFont(TTFont("HighlightsRegular", layout.font_path))
            font = "HighlightsRegular"
            bold = font
            if layout.bold_font_path:
                pdfmetrics.registerFont(TTFont("HighlightsBold", layout.bold_font_path))
                bold = "HighlightsBold"
        except Exception as e:
            logger.error(f"Failed to load custom font, falling back to {layout.font}: {e}")
            font, bold = layout.font, layout.bold_font
    return font, bold


def wrap_text(text: str, font: str, font_size: float, width: float) -> List[str]:
    return simpleSplit(text, font, font_size, width) or [""]


def render_pdf(
    result: ExtractionResult,
    output: Union[str, Path, BinaryIO],
    title: str,
    layout: Optional[PdfLayout] = None,
) -> int:
    """Write the highlights report to `output` and return its page count."""
    layout = layout or PdfLayout()
    font, bold = _register_fonts(layout)
    page_height = layout.page_size[1]
    target = str(output) if isinstance(output, Path) else output
    c = canvas.Canvas(target, pagesize=layout.page_size)
    c.setTitle("Extracted Highlights")

    def draw(text: str, y: float) -> None:
        c.drawString(layout.margin, page_height - y, text)

    y = layout.top
    c.setFont(bold, layout.title_font_size)
    c.setFillColor(TITLE_COLOR)
    draw("Extracted Highlights", y)
    y += 10 * mm

    c.setFont(font, layout.source_font_size)
    c.setFillColor(SOURCE_COLOR)
    draw(f"Source: {title}", y)
    y += 15 * mm

    for h in result.highlights:
        if y > layout.label_break:
            c.showPage()
            y = layout.top

        c.setFont(bold, layout.label_font_size)
        c.setFillColor(LABEL_COLOR)
        draw(f"PAGE {h.page or '?'}:", y)
        y += layout.label_gap

        lines = wrap_text(h.text, font, layout.body_font_size, layout.content_width)
        if y + len(lines) * layout.line_height > layout.block_break:
            c.showPage()
            y = layout.top

        c.setFont(font, layout.body_font_size)
        c.setFillColor(BODY_COLOR)
        for i, line in enumerate(lines):
            draw(line, y + i * layout.line_height)
        y += len(lines) * layout.line_height + layout.entry_gap

    pages = c.getPageNumber()
    c.save()
    return pages
