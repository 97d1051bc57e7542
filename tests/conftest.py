import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _pdf(*lines: str) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in lines:
        c.drawString(72, y, line)
        y -= 20
    c.save()
    return buf.getvalue()


@pytest.fixture()
def dob_pdf_bytes() -> bytes:
    """Single-page PDF with a labelled date of birth in the header."""
    return _pdf("Patient Record", "Name: Jane Doe", "DOB: 05/03/1990", "Ref: 4471")


@pytest.fixture()
def dotted_dob_pdf_bytes() -> bytes:
    return _pdf("Lab Report", "Date of Birth - 7.11.1985")


@pytest.fixture()
def no_dob_pdf_bytes() -> bytes:
    return _pdf("Invoice 2024", "Total due: 120.00")


@pytest.fixture()
def second_page_dob_pdf_bytes() -> bytes:
    """DOB only on page 2, which must not be searched."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Cover sheet")
    c.showPage()
    c.drawString(72, 720, "DOB: 05/03/1990")
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
def pdf_dir(
    tmp_path: Path,
    dob_pdf_bytes: bytes,
    no_dob_pdf_bytes: bytes,
) -> Path:
    """Folder with a matching PDF, a PDF without DOB, and a corrupt PDF."""
    (tmp_path / "a_patient.pdf").write_bytes(dob_pdf_bytes)
    (tmp_path / "b_invoice.pdf").write_bytes(no_dob_pdf_bytes)
    (tmp_path / "c_broken.pdf").write_bytes(b"not a pdf")
    (tmp_path / "notes.txt").write_text("ignored")
    return tmp_path
