import logging
import sys
from typing import Optional

import config


def setup_logger(name: str = "vsm", level: Optional[str] = None) -> logging.Logger:
    """Return a logger writing to stdout, installing the handler only once."""
    logger = logging.getLogger(name)

    log_level = getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(log_level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    return logger
