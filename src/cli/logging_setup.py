"""
Structured logging configuration for CLI commands.

This module sets up Python logging with configurable log levels. Uses Rich
for human-friendly terminal output and supports file-based JSON logs.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
import sys

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    use_json: bool = False,
) -> None:
    """
    Configure Python logging for the equalizer application.

    Sets up logging with Rich handler for terminal output and optionally
    writes structured JSON logs to a file.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR").
        log_file: Optional path to write logs.
        use_json: If True, format file logs as JSON (default False).

    Examples:
        >>> from pathlib import Path
        >>> setup_logging(level="DEBUG", log_file=Path("logs/equalizer.log"))
        >>> import logging
        >>> logger = logging.getLogger(__name__)
        >>> logger.info("Equalizing weights")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    # Rich handler for interactive terminals, plain StreamHandler otherwise
    if sys.stderr.isatty():
        console = Console(stderr=True)
        rich_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=True,
            markup=True,
            rich_tracebacks=True,
        )
        rich_handler.setLevel(numeric_level)
        rich_handler.setFormatter(
            logging.Formatter("%(message)s", datefmt="[%Y-%m-%d %H:%M:%S]")
        )
        root_logger.addHandler(rich_handler)
    else:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(numeric_level)
        stream_handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(stream_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(numeric_level)
        if use_json:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root_logger.addHandler(file_handler)

    root_logger.debug(
        "Logging configured: level=%s, file=%s, json=%s",
        level,
        log_file if log_file else "None",
        use_json,
    )


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Converts log records to JSON with timestamp, level, logger name,
    message, and optional exception info.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON string.

        Args:
            record: LogRecord to format.

        Returns:
            JSON-formatted log string.
        """
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)
