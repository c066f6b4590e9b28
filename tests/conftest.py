import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Jane Doe Senior Python Engineer")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a DOCX with a heading, two styled paragraphs and a table."""
    document = docx.Document()
    document.add_heading("John Smith", level=1)
    document.add_paragraph("Backend developer with Django experience")
    paragraph = document.add_paragraph("Led a team of ")
    paragraph.add_run("five").bold = True
    paragraph.add_run(" engineers")
    table = document.add_table(rows=1, cols=1)
    table.cell(0, 0).text = "Table cell text"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()
