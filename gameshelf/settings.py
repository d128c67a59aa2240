import json
import logging
from typing import Dict
from pathlib import Path

from .filtering import DEFAULT_SKIP_IDS, DEFAULT_SKIP_KEYWORDS
from .utils import xdg_config_home

logger = logging.getLogger(__name__)

def default_settings_file() -> Path:
    return xdg_config_home() / "gameshelf" / "settings.json"

def _str_list(value, fallback):
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return [v.strip() for v in value if v.strip()]
    return list(fallback)

def load_settings(settings_file: Path) -> Dict:
    default = {
        "skip_keywords": list(DEFAULT_SKIP_KEYWORDS),
        "skip_app_ids": list(DEFAULT_SKIP_IDS),
    }
    try:
        if settings_file.exists():
            data = json.loads(settings_file.read_text("utf-8"))
            if not isinstance(data, dict):
                raise ValueError("top level is not an object")
            default.update({k: _str_list(data.get(k), default[k]) for k in default})
    except (OSError, ValueError) as e:
        logger.warning("Ignoring settings file %s: %s", settings_file, e)
    return default

def save_settings(settings_file: Path, settings: dict) -> None:
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    settings_file.write_text(json.dumps(settings, indent=2), encoding="utf-8")
