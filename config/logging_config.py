# config/logging_config.py
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

DEFAULT_LOGS_DIR = Path(__file__).parent.parent / "logs"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "weather_bot.console"


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(handler, logging.handlers.RotatingFileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )


def _has_console_handler(logger: logging.Logger) -> bool:
    return any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in logger.handlers)


def setup_logging(log_level: str = "INFO", logs_dir: Optional[Path] = None):
    """Configures root logging with file rotation and a console stream."""
    log_dir = Path(logs_dir) if logs_dir else DEFAULT_LOGS_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Repeated calls must not duplicate output
    if not _has_file_handler(logger, log_file):
        # 10 MB, 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logging.info("🔧 Logging to %s", log_file)

    if not _has_console_handler(logger):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # Request-level chatter from the HTTP and Slack clients
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("slack_bolt").setLevel(logging.WARNING)
    logging.getLogger("slack_sdk").setLevel(logging.WARNING)

    return logger
