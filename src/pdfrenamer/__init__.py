"""
PDF Renamer - rename a PDF from fields a vision model reads off its pages.

Main package initialization.
"""

from .config import RenameOptions
from .errors import PDFRenamerError
from .filename import FilenameGenerator
from .llm import LLMClient, ResponseParser
from .logger import Logger
from .pdf_utils import PageRange, PDFConverter, PDFDocument
from .renamer import PDFRenamer

__version__ = "1.0.0"

__all__ = [
    "RenameOptions",
    "PDFRenamerError",
    "FilenameGenerator",
    "LLMClient",
    "ResponseParser",
    "Logger",
    "PageRange",
    "PDFConverter",
    "PDFDocument",
    "PDFRenamer",
]
