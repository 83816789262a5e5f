from .base import TextExtractor
from .models import RawDocument
from .pdf_parser import PdfTextExtractor

__all__ = [
    "PdfTextExtractor",
    "RawDocument",
    "TextExtractor",
]
