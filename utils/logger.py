# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from utils.settings import LOG_DIR, LOG_FILE, LOGGER_NAME


def setup_logger(log_dir: Path | None = None) -> logging.Logger:
    # Console + midnight-rotating file. Services log through children
    # of this logger (storefront.cart, ...) and add no handlers.
    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    # already configured
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_dir / LOG_FILE,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info(f"Logging to {log_dir / LOG_FILE}")
    return logger


def get_logger(name: str) -> logging.Logger:
    # Child logger, e.g. get_logger("cart") -> "storefront.cart"
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
