import io
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from lease_analyzer.analysis.models import AnalysisResult
from lease_analyzer.processor.models import UploadedFile


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "OIL AND GAS LEASE")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def make_file() -> Callable[..., UploadedFile]:
    """Build an UploadedFile; size defaults to the content length."""

    def _make(
        name: str = "lease.txt",
        mime_type: str = "text/plain",
        content: bytes = b"Lessor: John Doe\nLessee: Acme Energy",
        size: int | None = None,
    ) -> UploadedFile:
        return UploadedFile(
            name=name,
            size=len(content) if size is None else size,
            mime_type=mime_type,
            content=content,
        )

    return _make


@pytest.fixture()
def complete_analysis() -> AnalysisResult:
    return AnalysisResult(
        lessors=["John Doe"],
        lessees=["Oil Company Inc."],
        acreage="160 acres",
        depths="All formations below 500 feet",
        term="5 years",
        royalty="12.5%",
        insights=["Standard lease terms"],
    )
