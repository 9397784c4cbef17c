"""
Console logger shared by every module.
Log records go to stderr so stdout only ever carries the report.
"""

import logging
import sys

from colorama import Fore, Style


class ColorFormatter(logging.Formatter):

    LEVEL_STYLES = {
        logging.DEBUG: (Fore.WHITE, "[DEBUG]"),
        logging.INFO: (Fore.CYAN, "[*]"),
        logging.WARNING: (Fore.YELLOW, "[!]"),
        logging.ERROR: (Fore.RED, "[-]"),
        logging.CRITICAL: (Fore.RED + Style.BRIGHT, "[X]"),
    }

    def format(self, record: logging.LogRecord) -> str:
        color, prefix = self.LEVEL_STYLES.get(record.levelno, (Fore.WHITE, "[*]"))
        message = super().format(record)
        return f"{color}{prefix}{Style.RESET_ALL} {message}"


class StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time."""

    def emit(self, record: logging.LogRecord):
        self.stream = sys.stderr
        super().emit(record)


def _build_logger() -> logging.Logger:
    log = logging.getLogger("revelio")
    if not log.handlers:
        handler = StderrHandler(sys.stderr)
        handler.setFormatter(ColorFormatter("%(message)s"))
        log.addHandler(handler)
    log.setLevel(logging.INFO)
    log.propagate = False
    return log


logger = _build_logger()


def set_verbose(enabled: bool = True):
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


def set_silent(enabled: bool = True):
    logger.setLevel(logging.ERROR if enabled else logging.INFO)
