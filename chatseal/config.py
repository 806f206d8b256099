import logging
import os
from typing import Optional

from dotenv import load_dotenv
load_dotenv()

LOG_LEVEL = os.getenv("CHATSEAL_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    # Un único handler aunque se llame varias veces
    logger = logging.getLogger("chatseal")
    logger.setLevel((level or LOG_LEVEL).upper())
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
