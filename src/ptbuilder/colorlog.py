"""
PTBuilder Color Log Formatter - ANSI Color-Coded Log Message Formatting

PURPOSE:
    Colors console log lines by severity. Colors are dropped when the
    handler does not write to a terminal (or NO_COLOR is set), so that
    redirected logs stay free of escape codes.

WHO READS ME:
    - main.py: setup_logging() installs CustomFormatter on the root handlers

WHO I READ:
    - None (leaf module, no internal dependencies)

COLOR SCHEME:
    - DEBUG: Grey
    - INFO: Cyan
    - WARNING: Yellow
    - ERROR: Red
    - CRITICAL: Bold Red

LOG FORMAT:
    %(asctime)s - %(levelname)s - %(message)s (%(name)s)
    Example: "2026-10-18 13:04:26,789 - INFO - Topology is valid. (ptbuilder.session)"
"""

import logging
import os


class CustomFormatter(logging.Formatter):
    """return a formatter that prints log messages with color"""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    cyan = "\x1b[36;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    template = "%(asctime)s - %(levelname)s - %(message)s (%(name)s)"

    COLORS = {
        logging.DEBUG: grey,
        logging.INFO: cyan,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red,
    }

    def __init__(self, use_color: bool = True):
        super().__init__(self.template)
        self.use_color = use_color and "NO_COLOR" not in os.environ
        self._formatters = {
            level: logging.Formatter(color + self.template + self.reset)
            for level, color in self.COLORS.items()
        }

    @classmethod
    def for_handler(cls, handler: logging.Handler) -> "CustomFormatter":
        isatty = getattr(getattr(handler, "stream", None), "isatty", None)
        return cls(use_color=bool(isatty and isatty()))

    def format(self, record):
        if not self.use_color:
            return super().format(record)
        formatter = self._formatters.get(record.levelno, self)
        if formatter is self:
            return super().format(record)
        return formatter.format(record)
