"""
Logger for PDF Renamer
"""

import sys
from datetime import datetime
from typing import Any, Optional, TextIO


class Logger:
    """Key/value event logging with timestamp, written to stderr"""

    def __init__(self, verbose: bool = False, stream: Optional[TextIO] = None):
        self.verbose = verbose
        self.stream = stream

    @staticmethod
    def format_value(value: Any) -> str:
        """Render a single value, quoting anything with whitespace or quotes"""
        text = str(value)
        if text == "" or any(c.isspace() or c in "\"=" for c in text):
            escaped = (
                text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
            )
            return f'"{escaped}"'
        return text

    def log(self, event: str, level: str = "INFO", **fields: Any):
        """Log an event with timestamp and key=value fields"""
        if level == "DEBUG" and not self.verbose:
            return
        timestamp = datetime.now().strftime("%H:%M:%S")
        pairs = " ".join(f"{k}={self.format_value(v)}" for k, v in fields.items())
        line = f"[{timestamp}] {level}: {event}"
        if pairs:
            line = f"{line} {pairs}"
        print(line, file=self.stream or sys.stderr)

    def info(self, event: str, **fields: Any):
        """Log info event"""
        self.log(event, "INFO", **fields)

    def error(self, event: str, **fields: Any):
        """Log error event"""
        self.log(event, "ERROR", **fields)

    def debug(self, event: str, **fields: Any):
        """Log debug event"""
        self.log(event, "DEBUG", **fields)

    def warning(self, event: str, **fields: Any):
        """Log warning event"""
        self.log(event, "WARNING", **fields)
