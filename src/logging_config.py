"""Centralized logging configuration."""
import logging
import sys

CONSOLE_HANDLER_NAME = "cms-console"


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure logging for the application.

    Safe to call more than once: the console handler is installed a single
    time and later calls only change the level.
    """
    if isinstance(level, str):
        level = level.upper()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = next(
        (h for h in root_logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME),
        None
    )
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
    console_handler.setLevel(level)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    return logging.getLogger(name)
