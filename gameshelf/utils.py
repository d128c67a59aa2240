import os
from pathlib import Path
from typing import Iterable, Optional
from PIL import Image

def xdg_data_home() -> Path:
    return Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")

def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")

def pick_best_image(candidates: Iterable[Path], target_ar: float) -> Optional[Path]:
    """Image whose aspect ratio is closest to target_ar; larger area wins ties.

    Files Pillow cannot open are ignored.
    """
    best = None
    best_score = float("inf")
    best_area = -1
    for f in candidates:
        try:
            with Image.open(f) as im:
                w, h = im.size
        except (OSError, ValueError, Image.DecompressionBombError):
            continue
        if w <= 0 or h <= 0:
            continue
        score = abs(w / h - target_ar)
        area = w * h
        if score < best_score or (abs(score - best_score) < 1e-6 and area > best_area):
            best, best_score, best_area = f, score, area
    return best
