"""
mesh-quai Logging System
========================

A thread-safe logging utility for mesh-quai. This module integrates with
the standard Python `logging` library and the `rich` library to provide
sanitized, highlighted console output and optional rotating log files.

Settings are read from the process environment (LOG_LEVEL, LOG_FORMAT,
LOG_DATE_FORMAT, LOG_CONSOLE_HIGHLIGHTING, LOG_FILE) with defaults in
`meshquai.constants.LOGGER_DEFAULTS`.

Usage:
    >>> from meshquai.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Middleware started")
"""

import logging
import logging.handlers
import os
import re
import sys
import threading
import time
from pathlib import Path
from typing import Mapping, Optional

from rich.console import Console
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.theme import Theme

from .constants import LOGGER_DEFAULTS, LOG_BACKUP_COUNT, LOG_MAX_FILE_SIZE


def _setting(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get(name) or LOGGER_DEFAULTS[name]


class LogManager:
    """
    Manages logging configuration via the Singleton pattern.

    This class ensures that the logging subsystem is initialized exactly once.
    It attaches a 'Rich' console handler and, when LOG_FILE is set, a rotating
    file handler.
    """

    _instance: Optional["LogManager"] = None
    _lock: threading.Lock = threading.Lock()

    def __new__(cls) -> "LogManager":
        """Creates or returns the existing singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        self._configured = False
        self._initialized = True

    @staticmethod
    def validate_log_format(log_format: str) -> str:
        """
        Validates the syntax of a logging format string.

        Formats a dummy record to catch runtime errors.

        Returns:
            str: The validated format string, or the default if validation fails.
        """
        default = LOGGER_DEFAULTS["LOG_FORMAT"]
        if not log_format:
            return default

        specifier_pattern = r"\([a-zA-Z_][a-zA-Z0-9_]*\)[a-zA-Z]"
        try:
            # Every "(name)x" must be preceded by a '%'
            for match in re.finditer(specifier_pattern, log_format):
                if match.start() == 0 or log_format[match.start() - 1] != "%":
                    raise ValueError("Malformed format specifier.")

            record = logging.LogRecord(
                name="test", level=logging.INFO, pathname="", lineno=0,
                msg="test", args=(), exc_info=None,
            )
            logging.Formatter(fmt=log_format).format(record)
        except (ValueError, KeyError, TypeError) as e:
            print(
                f"{time.strftime(LOGGER_DEFAULTS['LOG_DATE_FORMAT'])} - meshquai.logger - "
                f"Invalid log format: {e}. Using default.",
                file=sys.stderr,
            )
            return default

        return log_format

    @staticmethod
    def validate_date_format(date_format: str) -> str:
        """
        Validates a date format string against standard strftime directives.

        Returns:
            str: The validated date format string, or default if validation fails.
        """
        default = LOGGER_DEFAULTS["LOG_DATE_FORMAT"]
        if not date_format:
            return default

        # Only strftime directives and plain separators are allowed.
        date_format_pattern = re.compile(
            r"^(?=.*%[A-Za-z])(?:%%|%[A-Za-z]|[0-9 \t:\-\/\.,TZ+])+$"
        )
        if not date_format_pattern.match(date_format):
            print(
                f"{time.strftime(default)} - meshquai.logger - "
                f"Invalid date format. Using default.",
                file=sys.stderr,
            )
            return default

        return date_format

    def configure(
        self,
        log_level: Optional[str] = None,
        log_file: Optional[Path] = None,
        console_output: bool = True,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Configures the root logger with console and file handlers.

        Args:
            log_level: Logging level (DEBUG, INFO, etc.). Defaults to LOG_LEVEL.
            log_file: Path to a log file. Defaults to LOG_FILE; no file when empty.
            console_output: Enable console logging. Defaults to True.
            environ: Mapping to read LOG_* settings from. Defaults to os.environ.
        """
        with self._lock:
            if self._configured:
                return

            level_str = log_level or _setting("LOG_LEVEL", environ)
            numeric_level = getattr(logging, str(level_str).upper(), logging.INFO)

            root_logger = logging.getLogger()
            root_logger.setLevel(numeric_level)
            root_logger.handlers.clear()

            log_format = self.validate_log_format(_setting("LOG_FORMAT", environ))
            date_format = self.validate_date_format(_setting("LOG_DATE_FORMAT", environ))

            # UTC timestamps regardless of host timezone
            formatter = TerminalSafeFormatter(fmt=log_format, datefmt=date_format + " UTC")
            formatter.converter = time.gmtime

            if console_output:
                highlighting = _setting("LOG_CONSOLE_HIGHLIGHTING", environ)
                if highlighting.strip().casefold() == "true":
                    theme = Theme(
                        {
                            "meshquai.level_critical": "bold red reverse",
                            "meshquai.level_debug":    "bold dim",
                            "meshquai.level_error":    "bold red",
                            "meshquai.level_info":     "bold green",
                            "meshquai.level_warning":  "bold yellow",
                            "meshquai.logger_name":    "magenta",
                            "meshquai.mode":           "bold white",
                            "meshquai.network":        "bold magenta",
                            "meshquai.timestamp":      "bold cyan",
                            "meshquai.url":            "cyan",
                        }
                    )
                    console = Console(theme=theme, highlight=False, stderr=True)
                    handler: logging.Handler = RichHandler(
                        console=console,
                        highlighter=MeshQuaiLogHighlighter(),
                        keywords=[],
                        rich_tracebacks=True,
                        show_path=False,
                        show_time=False,
                        show_level=False,
                        markup=False,
                    )
                else:
                    handler = logging.StreamHandler(sys.stderr)
                handler.setLevel(numeric_level)
                handler.setFormatter(formatter)
                root_logger.addHandler(handler)

            file_setting = log_file or _setting("LOG_FILE", environ)
            if file_setting:
                log_file_path = Path(file_setting)
                log_file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.handlers.RotatingFileHandler(
                    filename=str(log_file_path),
                    maxBytes=LOG_MAX_FILE_SIZE,
                    backupCount=LOG_BACKUP_COUNT,
                    encoding="utf-8",
                )
                file_handler.setLevel(numeric_level)
                file_handler.setFormatter(formatter)
                root_logger.addHandler(file_handler)

            self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        """
        Retrieves a logger for a specific module, configuring on first use.
        """
        if not self._configured:
            self.configure()
        return logging.getLogger(name)

    @property
    def is_configured(self) -> bool:
        """Returns True if the logging system has been configured."""
        return self._configured


class TerminalSafeFormatter(logging.Formatter):
    """
    A formatter that strips ANSI escape sequences and non-printable
    control characters from log output.

    Values such as GOQUAI are echoed into logs verbatim, so they must not
    be able to move the cursor or recolour the terminal.
    """

    _ansi_escape_re = re.compile(
        r"\x1b\[[0-?]*[ -/]*[@-~]"
        r"|\x1b[@-Z\\-_]"
    )
    # Control chars (0x00-0x1F) excluding Tab and Newline
    _control_chars_re = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
    _carriage_return_re = re.compile(r"\r")

    @classmethod
    def sanitize(cls, text: str) -> str:
        if not text:
            return text
        text = cls._ansi_escape_re.sub("", text)
        text = cls._carriage_return_re.sub("", text)
        text = cls._control_chars_re.sub("", text)
        return text

    def format(self, record: logging.LogRecord) -> str:
        return self.sanitize(super().format(record))


class MeshQuaiLogHighlighter(RegexHighlighter):
    """Rich highlighter for levels, modes, networks and node URLs."""

    base_style = "meshquai."
    highlights = [
        r"(?P<level_critical>\bCRITICAL\b)",
        r"(?P<level_debug>\bDEBUG\b)",
        r"(?P<level_error>\bERROR\b)",
        r"(?P<level_info>\bINFO\b)",
        r"(?P<level_warning>\bWARNING\b)",
        r"\-\s+\w+\s+-\s+(?P<logger_name>[\w.]+)(?=\s-\s)",
        r"(?P<mode>\b(ONLINE|OFFLINE)\b)",
        r"(?P<network>\b(MAINNET|ORCHARD|LOCAL|Mainnet|Orchard|Dev)\b)",
        r"(?P<timestamp>^(.*?)UTC)",
        r"(?P<url>https?://\S+)",
    ]


_manager = LogManager()


def configure_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    console_output: bool = True,
) -> None:
    """Configures the logging system once; later calls are no-ops."""
    _manager.configure(log_level=log_level, log_file=log_file, console_output=console_output)


def get_logger(name: str) -> logging.Logger:
    """
    Public accessor of the logging system.
    Delegates to the Singleton LogManager, ensuring configuration is applied.
    """
    return _manager.get_logger(name)
