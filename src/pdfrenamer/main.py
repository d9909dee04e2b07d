"""
Main entry point and orchestration
"""

import sys
from typing import List, Optional

from .config import RenameOptions, parse_args
from .errors import PDFRenamerError
from .logger import Logger
from .renamer import PDFRenamer


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    args = parse_args(argv)
    options = RenameOptions.from_args(args)
    logger = Logger(options.verbose)

    renamer = None
    try:
        renamer = PDFRenamer(options, logger=logger)
        renamer.process_pdf()
    except PDFRenamerError as e:
        logger.error("rename.failed", file=options.pdf_path, error=e)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if renamer is not None:
            renamer.close()

    sys.exit(0)


if __name__ == "__main__":
    main()
