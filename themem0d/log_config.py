"""
Logging configuration for the themem0d command line.
"""
import logging
import sys


class CustomFormatter(logging.Formatter):
    """
    Custom formatter with colored output for console logging.
    """
    # ANSI color codes
    GREY = "\x1b[38;20m"
    YELLOW = "\x1b[33;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    BASE_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

    FORMATS = {
        logging.DEBUG: f"{GREY}{BASE_FORMAT}{RESET}",
        logging.INFO: BASE_FORMAT,
        logging.WARNING: f"{YELLOW}{BASE_FORMAT}{RESET}",
        logging.ERROR: f"{RED}{BASE_FORMAT}{RESET}",
        logging.CRITICAL: f"{BOLD_RED}{BASE_FORMAT}{RESET}",
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.BASE_FORMAT)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def setup_logging(verbose=False):
    """
    Send themem0d log records to stderr.

    Diagnostics (skipped templates, monitors without a usable palette) go
    through logging; regular progress output is printed by the CLI.
    """
    logger = logging.getLogger("themem0d")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Clear any existing handlers
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(CustomFormatter())
    logger.addHandler(console_handler)

    return logger
