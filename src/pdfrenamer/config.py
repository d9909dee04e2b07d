"""
CLI configuration and argument parsing
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .pdf_utils import PageRange, PDFDocument

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_FORMAT = "{{.Title}}.pdf"


def existing_file(value: str) -> Path:
    """argparse type: path to an existing regular file"""
    path = Path(value)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"file not found: {value}")
    return path


@dataclass(frozen=True)
class RenameOptions:
    """Resolved settings for one rename run"""

    pdf_path: Path
    page_range: PageRange
    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    image_model: str = DEFAULT_MODEL
    text_model: str = DEFAULT_MODEL
    filename_format: str = DEFAULT_FORMAT
    prompt: str = ""
    dry_run: bool = False
    verbose: bool = False
    dpi: int = PDFDocument.DEFAULT_DPI

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RenameOptions":
        return cls(
            pdf_path=args.filename,
            page_range=PageRange.parse(args.page_range),
            endpoint=args.endpoint,
            api_key=args.api_key,
            image_model=args.image_model,
            text_model=args.text_model,
            filename_format=args.format,
            prompt=args.prompt,
            dry_run=args.dry_run,
            verbose=args.verbose,
            dpi=args.dpi,
        )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser"""
    parser = argparse.ArgumentParser(
        prog="pdfrenamer",
        description="Rename a PDF from fields a vision model reads off its pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
  pdfrenamer scan.pdf --page-range 0-0 --format "{{.Date}}_{{.Company | snakecase}}.pdf" --dry-run
        """,
    )

    parser.add_argument("filename", type=existing_file, help="PDF file to rename")

    parser.add_argument(
        "--page-range",
        default="1",
        help="range of pages to analyze from PDF (default: 1)",
    )

    parser.add_argument(
        "--endpoint",
        help="OpenAI-compatible endpoint (default: OPENAI_BASE_URL or api.openai.com)",
    )

    parser.add_argument(
        "--api-key", help="OpenAI API key (default: OPENAI_API_KEY)"
    )

    parser.add_argument(
        "--image-model",
        default=DEFAULT_MODEL,
        help=f"model used to convert page images to markdown (default: {DEFAULT_MODEL})",
    )

    parser.add_argument(
        "--text-model",
        default=DEFAULT_MODEL,
        help=f"model used to extract filename fields (default: {DEFAULT_MODEL})",
    )

    parser.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        help="template of the file to rename to (default: %(default)s)",
    )

    parser.add_argument(
        "--prompt",
        default="",
        help="additional info prompt to use to extract text from PDF",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="do not rename files, just print what would be done",
    )

    parser.add_argument(
        "--dpi",
        type=int,
        default=PDFDocument.DEFAULT_DPI,
        help=f"resolution used to rasterize pages (default: {PDFDocument.DEFAULT_DPI})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = create_parser()
    return parser.parse_args(argv)
