# refer - https://loguru.readthedocs.io/en/stable/api/logger.html
import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

logger.remove() # remove default stuff

STDERR_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

logger.configure(extra={"name": "docmeta"})

_stderr_handler = logger.add(sys.stderr, format=STDERR_FORMAT, level="INFO", colorize=True)

log_dir = Path(os.environ.get("DOCMETA_LOG_DIR", "logs"))
log_dir.mkdir(parents=True, exist_ok=True)


# store error log files
logger.add(
    log_dir / "errors_{time:YYYY-MM-DD}.log",
    format=FILE_FORMAT,
    level="ERROR",
    rotation="5 MB",
    retention="90 days",
)

# Function to get logger with context
def get_logger(name: Optional[str] = None):
    if name:
        return logger.bind(name=name)
    return logger


def add_log_file(filepath: str, level: str = "INFO", **kwargs) -> int:
    return logger.add(filepath, format=FILE_FORMAT, level=level, **kwargs)


def set_log_level(level: str):
    """Replace the stderr sink; file sinks keep their own levels."""
    global _stderr_handler
    logger.remove(_stderr_handler)
    _stderr_handler = logger.add(sys.stderr, format=STDERR_FORMAT, level=level.upper(), colorize=True)
