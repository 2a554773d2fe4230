# textcompare/utils/prefs.py

import json
from pathlib import Path
from platformdirs import user_config_dir

from textcompare.config import PREFS_FILENAME
from textcompare.utils.logger import APP_NAME, APP_AUTHOR, logger

DEFAULT_PREFS = {
    "format": "text",
    "highlight_spaces": True,
}

def _prefs_path() -> Path:
    cfg_dir = Path(user_config_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
    cfg_dir.mkdir(parents=True, exist_ok=True)
    return cfg_dir / PREFS_FILENAME

def load_prefs() -> dict:
    """Stored preferences merged over the defaults; never raises."""
    prefs = dict(DEFAULT_PREFS)
    try:
        p = _prefs_path()
        if p.exists():
            stored = json.loads(p.read_text(encoding="utf-8"))
            if isinstance(stored, dict):
                prefs.update(stored)
    except Exception as e:
        logger.warning("Failed to load prefs: %s", e)
    return prefs

def save_prefs(data: dict) -> None:
    try:
        p = _prefs_path()
        p.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except Exception as e:
        logger.warning("Failed to save prefs: %s", e)
