import logging
import re
from pathlib import Path
from typing import List, Optional

from .utils import pick_best_image

logger = logging.getLogger(__name__)

ICON_EXTENSIONS = (".png", ".jpg", ".ico")
# newer clients store <appid>/<sha1>.jpg
HASHED_ICON = re.compile(r"^[0-9a-f]{40}\.jpg$")
ICON_ASPECT = 1.0

def icon_candidates(appid: str, cache_dir: Path) -> List[Path]:
    return [cache_dir / f"{appid}_icon{ext}" for ext in ICON_EXTENSIONS]

def _hashed_icons(app_cache: Path) -> List[Path]:
    try:
        entries = sorted(app_cache.iterdir())
    except OSError:
        return []
    return [p for p in entries if p.is_file() and HASHED_ICON.match(p.name.lower())]

def find_icon(appid: str, cache_dir: Optional[Path]) -> Optional[Path]:
    """Cached icon for an app, or None. Never raises."""
    if cache_dir is None:
        return None
    cache_dir = Path(cache_dir)
    try:
        for candidate in icon_candidates(appid, cache_dir):
            if candidate.is_file():
                return candidate

        hashed = _hashed_icons(cache_dir / appid)
        if len(hashed) == 1:
            return hashed[0]
        if hashed:
            return pick_best_image(hashed, ICON_ASPECT)
    except OSError as e:
        logger.debug("Icon lookup for %s failed: %s", appid, e)
    return None
