"""
Main entry point for running the PDF Renamer as a module.

Usage: python -m pdfrenamer [arguments]
"""

from pdfrenamer.main import main

if __name__ == "__main__":
    main()
