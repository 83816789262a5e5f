from pathlib import Path

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from report_kit.parsers.pdf_parser import PdfTextExtractor


def _draw_page(c: canvas.Canvas, lines: list[str]) -> None:
    _, height = LETTER
    text = c.beginText(40, height - 50)
    for line in lines:
        text.textLine(line)
    c.drawText(text)
    c.showPage()


def _create_sample_pdf(path: Path) -> None:
    """Creates a deterministic single-page annual report excerpt."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    _draw_page(
        c,
        [
            "HILLSBORO PUBLIC LIBRARY ANNUAL REPORT 2023",
            "",
            "LIBRARY OVERVIEW:",
            "Population served: 3781",
            "Annual visits: 4911",
            "",
            "COLLECTION:",
            "Adult Fiction 2364",
        ],
    )
    c.save()


def _create_multipage_pdf(path: Path) -> None:
    """Creates a deterministic three-page PDF whose middle page is blank."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    _draw_page(c, ["PAGE ONE CONTENT:", "This content is on page one."])
    c.showPage()
    _draw_page(c, ["PAGE THREE CONTENT:", "This content is on page three."])
    c.save()


def _create_blank_pdf(path: Path) -> None:
    """Creates a PDF with a single page and no text."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    c.rect(100, 100, 200, 200)
    c.showPage()
    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _create_sample_pdf(dir_path / "sample.pdf")
    _create_multipage_pdf(dir_path / "multipage.pdf")
    _create_blank_pdf(dir_path / "blank.pdf")

    return dir_path


@pytest.fixture(scope="module")
def sample_text(pdf_dir: Path) -> str:
    """Extract sample PDF once, reuse across tests."""
    return PdfTextExtractor().extract(pdf_dir / "sample.pdf")


@pytest.fixture(scope="module")
def multipage_text(pdf_dir: Path) -> str:
    """Extract multipage PDF once, reuse across tests."""
    return PdfTextExtractor().extract(pdf_dir / "multipage.pdf")
