"""
Error types raised by the rename pipeline
"""

from typing import Optional


class PDFRenamerError(Exception):
    """Base error for a failed rename run (wrapped)."""


class DocumentOpenError(PDFRenamerError):
    """The PDF could not be opened or inspected."""


class PageError(PDFRenamerError):
    """A failure tied to a single page."""

    def __init__(self, message: str, page: Optional[int] = None):
        super().__init__(message)
        self.page = page


class PageRenderError(PageError):
    """Rasterizing or encoding a page failed."""


class TranscriptionError(PageError):
    """The image model request for a page failed."""


class ExtractionError(PDFRenamerError):
    """The text model request failed."""


class FieldDecodeError(PDFRenamerError):
    """The text model did not return a flat JSON object of strings."""


class TemplateCompileError(PDFRenamerError):
    """The filename format could not be parsed."""


class TemplateRenderError(PDFRenamerError):
    """The filename format failed while rendering."""


class RenameError(PDFRenamerError):
    """Moving the source file to its new name failed."""
