import logging
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

# Loggers whose records reach the service log; uvicorn.access is replaced by our request middleware
STDLIB_LEVELS = {
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "pymongo": logging.WARNING,
}

def loguru_level(record: logging.LogRecord):
    """Loguru level name for a stdlib record, or its number for custom levels."""
    try:
        return logger.level(record.levelname).name
    except ValueError:
        return record.levelno

class InterceptHandler(logging.Handler):
    """Sends uvicorn and pymongo records through loguru so every line shares one format."""

    def emit(self, record: logging.LogRecord):
        # Attribute the line to the code that called the stdlib logger, not to logging itself
        frame, depth = sys._getframe(1), 1
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(stdlib_logger=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(loguru_level(record), record.getMessage())

def setup_logging(level: str = "INFO", error_log_file: str = ""):
    logger.remove()
    logger.add(sys.stdout, level=level, format=CONSOLE_FORMAT)

    if error_log_file:
        logger.add(
            error_log_file,
            level="ERROR",
            rotation="10 MB",
            retention="1 month",
            compression="zip",
            format=FILE_FORMAT
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name, stdlib_level in STDLIB_LEVELS.items():
        logging.getLogger(name).setLevel(stdlib_level)

__all__ = ["logger", "setup_logging", "InterceptHandler"]
