import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("urllib3", "httpx", "uvicorn.access")


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    quiet_loggers: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """
    Configure logging for the CLI and the API server.

    Replaces any handlers already on the root logger, so calling it again
    (once per CLI invocation) does not duplicate output.

    Args:
        log_level: The logging level to use (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to also write logs to
        quiet_loggers: Loggers capped at WARNING
    """
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.debug("Logging configured with level=%s, file=%s", log_level, log_file)
