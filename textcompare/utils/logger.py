# textcompare/utils/logger.py

import logging
import os
from pathlib import Path
from platformdirs import user_log_dir

APP_NAME = "textcompare"
APP_AUTHOR = "textcompare"

DEBUG_ENV = "TEXTCOMPARE_DEBUG"
LOG_FILENAME = "comparisons.log"

def _level_from_env(value: str) -> int:
    """TEXTCOMPARE_DEBUG=1 means DEBUG; a level name (info, warning) is honoured too."""
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.DEBUG

def setup_logger():
    logger = logging.getLogger(APP_NAME)

    # Comparisons are silent unless TEXTCOMPARE_DEBUG is set
    debug = os.environ.get(DEBUG_ENV)
    if not debug:
        logger.setLevel(logging.CRITICAL)
        if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
            logger.addHandler(logging.NullHandler())
        logger.propagate = False
        return logger

    # Debug mode: one line per comparison step in the user log dir
    level = _level_from_env(debug)
    logger.setLevel(level)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        log_dir = Path(user_log_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)-7s [%(module)s] %(message)s"))
        logger.addHandler(fh)
    return logger

logger = setup_logger()
