import PyPDF2

from pdf_highlights.core.types import ExtractedHighlight, ExtractionResult
from pdf_highlights.render.pdf import PdfLayout, render_pdf, wrap_text
from pdf_highlights.render.text import export_file_name, render_clipboard_text, render_plain_text


def _result(*items):
    return ExtractionResult(
        highlights=[ExtractedHighlight(text, page) for page, text in items],
        pages_scanned=max((p for p, _ in items), default=0),
    )


def test_plain_text_layout():
    text = render_plain_text(_result((1, "Hello World"), (3, "Second")), "paper.pdf")
    assert text == (
        "EXTRACTED HIGHLIGHTS: paper.pdf\n\n"
        "[Page 1] Hello World\n\n---\n\n"
        "[Page 3] Second"
    )


def test_clipboard_text_has_no_labels():
    assert render_clipboard_text(_result((1, "a"), (2, "b"))) == "a\n\nb"
    assert render_clipboard_text(_result()) == ""


def test_export_file_name():
    assert export_file_name("paper.pdf", "txt") == "paper_highlights.txt"
    assert export_file_name("/tmp/Report.PDF", ".pdf") == "Report_highlights.pdf"
    assert export_file_name("notes", "txt") == "notes_highlights.txt"


def test_wrap_text_respects_width():
    lines = wrap_text("word " * 200, "Helvetica", 11, 300)
    assert len(lines) > 1
    assert wrap_text("", "Helvetica", 11, 300) == [""]


def test_render_pdf_writes_readable_report(tmp_path):
    out = tmp_path / "paper_highlights.pdf"
    pages = render_pdf(_result((1, "Hello World"), (2, "Another highlight")), out, "paper.pdf")
    assert pages == 1
    reader = PyPDF2.PdfReader(str(out))
    assert len(reader.pages) == 1
    text = reader.pages[0].extract_text()
    assert "Extracted Highlights" in text
    assert "Source: paper.pdf" in text
    assert "PAGE 2:" in text
    assert "Another highlight" in text


def test_render_pdf_breaks_pages(tmp_path):
    items = [(i, f"Highlight number {i} " * 30) for i in range(1, 41)]
    out = tmp_path / "long.pdf"
    pages = render_pdf(_result(*items), out, "long.pdf")
    assert pages > 1
    assert len(PyPDF2.PdfReader(str(out)).pages) == pages


def test_render_pdf_threshold_is_configurable(tmp_path):
    items = [(i, "short") for i in range(1, 6)]
    roomy = render_pdf(_result(*items), tmp_path / "a.pdf", "a.pdf")
    cramped = render_pdf(
        _result(*items), tmp_path / "b.pdf", "b.pdf", PdfLayout(label_break=60, block_break=80)
    )
    assert roomy == 1
    assert cramped > roomy
