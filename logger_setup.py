import logging
import sys
from pathlib import Path

from config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(level: str = None, log_dir: str = None) -> None:
    """Log to the console, to combined.log (everything) and to error.log (errors only)."""
    level = level or Config.LOG_LEVEL
    directory = Path(log_dir or Config.LOG_DIR)
    directory.mkdir(parents=True, exist_ok=True)

    error_handler = logging.FileHandler(directory / "error.log")
    error_handler.setLevel(logging.ERROR)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(directory / "combined.log"),
            error_handler,
        ],
        force=True,
    )


def log_uncaught_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.critical(
        f"Uncaught Exception: {exc_value}",
        exc_info=(exc_type, exc_value, exc_traceback),
    )


def log_unhandled_async_error(loop, context):
    # Logged only; the loop keeps serving requests.
    exception = context.get("exception")
    message = context.get("message", "Unhandled error in event loop")
    logger.error(f"Unhandled Rejection: {message}", exc_info=exception)


def install_exception_hooks() -> None:
    sys.excepthook = log_uncaught_exception
