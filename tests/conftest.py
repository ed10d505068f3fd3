import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture
def highlighted_pdf(tmp_path):
    """Three-page PDF: spatial + unreadable highlights and a sticky note on
    page 1, a highlight with typed contents on page 2, nothing on page 3."""
    path = tmp_path / "paper.pdf"
    c = canvas.Canvas(str(path), pagesize=letter)
    c.setFont("Helvetica", 12)
    c.drawString(100, 700, "Hello World")
    c.drawString(100, 400, "Untouched line")
    c.highlightAnnotation("", (95, 695, 200, 715), Color=[1, 1, 0])
    c.highlightAnnotation("", (10, 10, 20, 20))
    c.textAnnotation("A sticky note", Rect=(95, 695, 200, 715))
    c.showPage()
    c.setFont("Helvetica", 12)
    c.drawString(72, 500, "Second page text")
    c.highlightAnnotation("Typed by the reader", (70, 495, 250, 515))
    c.showPage()
    c.drawString(72, 500, "No marks here")
    c.showPage()
    c.save()
    return path
