# SPDX-License-Identifier: MIT

import logging
from logging.handlers import RotatingFileHandler

from studysync import configuration

LOGGER_NAME = "studysync"


def setup_logger(level: str = "INFO") -> logging.Logger:
    configuration.LOG_PATH.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = RotatingFileHandler(
            configuration.LOG_FILE_PATH,
            maxBytes=1_000_000,
            backupCount=3,
            encoding="utf-8",
        )
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)

    return logger
