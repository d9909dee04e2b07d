"""
Utility classes for PDF page selection, rasterization and image encoding
"""

import base64
import io
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pdf2image import convert_from_path, pdfinfo_from_path
from PIL import Image

from .errors import DocumentOpenError, PageRenderError


@dataclass(frozen=True)
class PageRange:
    """Inclusive, zero-based page window"""

    start: int = 0
    end: int = 0

    _NUMBER = re.compile(r"[+-]?\d+")

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid page range: {self.start}-{self.end}")

    @classmethod
    def _to_int(cls, text: str) -> int:
        if not cls._NUMBER.fullmatch(text):
            return 0
        return max(int(text), 0)

    @classmethod
    def parse(cls, text: str) -> "PageRange":
        """Parse "N" or "N-M".

        A single number always selects 0-0, and for "N-M" both bounds come
        from N. Unparseable numbers count as 0.
        """
        parts = text.split("-")
        if len(parts) == 2:
            start = cls._to_int(parts[0])
            return cls(start=start, end=start)
        return cls(start=0, end=0)

    def __contains__(self, index: int) -> bool:
        return self.start <= index <= self.end


class PDFDocument:
    """Open PDF rendered page by page through poppler.

    Use as a context manager so the document is always closed.
    """

    DEFAULT_DPI = 150

    def __init__(self, pdf_path: Path, dpi: int = DEFAULT_DPI):
        self.pdf_path = Path(pdf_path)
        self.dpi = dpi
        self._page_count: Optional[int] = None
        self._open()

    def _open(self):
        try:
            info = pdfinfo_from_path(str(self.pdf_path))
            self._page_count = int(info["Pages"])
        except Exception as e:
            raise DocumentOpenError(f"failed to open PDF: {e}") from e

    @property
    def closed(self) -> bool:
        return self._page_count is None

    @property
    def page_count(self) -> int:
        if self.closed:
            raise DocumentOpenError(f"document is closed: {self.pdf_path.name}")
        return self._page_count

    def render_page(self, index: int) -> Image.Image:
        """Render zero-based page ``index`` to an image"""
        if index < 0 or index >= self.page_count:
            raise PageRenderError(
                f"failed to convert page #{index} to image: page out of range",
                page=index,
            )
        try:
            images = convert_from_path(
                str(self.pdf_path),
                dpi=self.dpi,
                first_page=index + 1,
                last_page=index + 1,
            )
        except Exception as e:
            raise PageRenderError(
                f"failed to convert page #{index} to image: {e}", page=index
            ) from e
        if not images:
            raise PageRenderError(
                f"failed to convert page #{index} to image: no image returned",
                page=index,
            )
        return images[0]

    def close(self):
        self._page_count = None

    def __enter__(self) -> "PDFDocument":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class PDFConverter:
    """Utility class for image encoding"""

    JPEG_QUALITY = 100

    @staticmethod
    def image_to_base64(image: Image.Image) -> str:
        """Convert PIL Image to base64 JPEG string"""
        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        buffered = io.BytesIO()
        try:
            image.save(buffered, format="JPEG", quality=PDFConverter.JPEG_QUALITY)
            return base64.b64encode(buffered.getvalue()).decode()
        finally:
            buffered.close()
