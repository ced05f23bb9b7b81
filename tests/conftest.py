import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from intake.processor.models import CandidateFile


def _image_bytes(size: tuple[int, int], fmt: str, mode: str = "RGB", color: object = "red") -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """A 200x100 opaque PNG."""
    return _image_bytes((200, 100), "PNG")


@pytest.fixture()
def transparent_png_bytes() -> bytes:
    """A 10x10 fully transparent PNG."""
    return _image_bytes((10, 10), "PNG", mode="RGBA", color=(0, 0, 0, 0))


@pytest.fixture()
def jpeg_bytes() -> bytes:
    """A 120x80 JPEG."""
    return _image_bytes((120, 80), "JPEG", color="blue")


@pytest.fixture()
def large_png_bytes() -> bytes:
    """A 2000x1000 PNG, wider than an A4 page."""
    return _image_bytes((2000, 1000), "PNG", color="green")


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Invoice 0001")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def png_file(png_bytes: bytes) -> CandidateFile:
    return CandidateFile(
        content=png_bytes,
        media_type="image/png",
        name="scan.png",
        size=len(png_bytes),
    )


@pytest.fixture()
def pdf_file(sample_pdf_bytes: bytes) -> CandidateFile:
    return CandidateFile(
        content=sample_pdf_bytes,
        media_type="application/pdf",
        name="invoice.pdf",
        size=len(sample_pdf_bytes),
    )
