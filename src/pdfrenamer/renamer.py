"""
Core PDF renaming logic
"""

from pathlib import Path
from typing import Callable, List, Optional

from .config import RenameOptions
from .errors import PageRenderError, RenameError
from .filename import FilenameGenerator
from .llm import LLMClient, ResponseParser
from .logger import Logger
from .pdf_utils import PDFConverter, PDFDocument


class PDFRenamer:
    """Runs one PDF through transcription, extraction, templating and rename.

    Every collaborator can be passed in; the defaults talk to poppler and an
    OpenAI-compatible endpoint.
    """

    def __init__(
        self,
        options: RenameOptions,
        logger: Optional[Logger] = None,
        llm_client: Optional[LLMClient] = None,
        document_factory: Callable[..., PDFDocument] = PDFDocument,
        pdf_converter: Optional[PDFConverter] = None,
        rename: Optional[Callable[[Path, Path], None]] = None,
        output: Optional[Callable[[str], None]] = None,
    ):
        self.options = options
        self.logger = logger or Logger(options.verbose)
        self.llm_client = llm_client or LLMClient(options.endpoint, options.api_key)
        self.document_factory = document_factory
        self.pdf_converter = pdf_converter or PDFConverter()
        self.response_parser = ResponseParser()
        self.rename = rename or Path.rename
        self.output = output or print

    def transcribe(self) -> List[str]:
        """Convert each selected page to markdown, in page order"""
        page_range = self.options.page_range
        contents: List[str] = []

        self.logger.info("pdf.process", start=page_range.start, end=page_range.end)

        with self.document_factory(self.options.pdf_path, dpi=self.options.dpi) as doc:
            for n in range(doc.page_count):
                if n < page_range.start:
                    self.logger.info("pdf.skip", page=n)
                    continue
                if n > page_range.end:
                    self.logger.info("pdf.end", page=n)
                    break

                self.logger.info("pdf.open", page=n)
                image = doc.render_page(n)

                self.logger.info("pdf.image", page=n)
                try:
                    image_base64 = self.pdf_converter.image_to_base64(image)
                except (OSError, ValueError) as e:
                    raise PageRenderError(
                        f"failed to encode image #{n}: {e}", page=n
                    ) from e

                self.logger.info("pdf.markdown", page=n)
                contents.append(
                    self.llm_client.transcribe_page(
                        image_base64, self.options.image_model, page=n
                    )
                )

        return contents

    def extract(self, markdown: str) -> dict:
        """Ask the text model for the template fields"""
        self.logger.info(
            "extract",
            prompt=self.options.prompt,
            format=self.options.filename_format,
        )
        self.logger.debug("extract.markdown", markdown=markdown)

        payload = self.llm_client.extract_fields(
            markdown,
            self.options.text_model,
            self.options.prompt,
            self.options.filename_format,
        )
        self.logger.info("extracted", payload=payload)
        return self.response_parser.parse_fields(payload)

    def apply_filename(self, new_filename: str) -> Path:
        """Print the name on a dry run, otherwise move the PDF to it"""
        pdf_path = self.options.pdf_path
        if self.options.dry_run:
            self.output(new_filename)
            return pdf_path

        if not new_filename.strip():
            raise RenameError("failed to rename file: rendered filename is empty")
        if Path(new_filename).name != new_filename or new_filename in (".", ".."):
            raise RenameError(
                f"failed to rename file: rendered filename is not a plain file name: {new_filename!r}"
            )

        new_path = pdf_path.parent / new_filename
        if new_path == pdf_path:
            self.logger.info("rename.skip", file=pdf_path, reason="same name")
            return pdf_path
        if new_path.exists():
            raise RenameError(f"failed to rename file: {new_path} already exists")

        try:
            self.rename(pdf_path, new_path)
        except OSError as e:
            raise RenameError(f"failed to rename file: {e}") from e

        self.logger.info("rename", source=pdf_path, target=new_path)
        return new_path

    def process_pdf(self) -> Path:
        """Run the whole pipeline; returns the file's final path"""
        # Compile first so a bad format fails before any model call.
        generator = FilenameGenerator(self.options.filename_format)

        markdown = "\n\n".join(self.transcribe())
        fields = self.extract(markdown)

        new_filename = generator.generate_filename(fields)
        self.logger.info("filename", name=new_filename)

        return self.apply_filename(new_filename)

    def close(self):
        """Cleanup resources"""
        self.llm_client.close()
