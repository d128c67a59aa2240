import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .filtering import SkipRules
from .settings import default_settings_file, load_settings
from .utils import xdg_data_home

__version__ = "0.3.0"

# Environment overrides (explicit arguments still win)
STEAM_ROOT_ENV = "STEAM_ROOT"
APP_DIR_ENV = "GAMESHELF_APP_DIR"

@dataclass(frozen=True)
class ShelfConfig:
    steam_root: Path
    app_dir: Path
    icon_cache_dir: Path
    rules: SkipRules = field(default_factory=SkipRules)
    dry_run: bool = False

    @property
    def config_path(self) -> Path:
        return self.steam_root / "steamapps" / "libraryfolders.vdf"

def create_config(steam_root: Optional[str] = None,
                  app_dir: Optional[str] = None,
                  skip_keywords: Optional[Iterable[str]] = None,
                  skip_app_ids: Optional[Iterable[str]] = None,
                  dry_run: bool = False,
                  settings_file: Optional[Path] = None) -> ShelfConfig:
    """Resolve every setting: argument > environment > settings file > default."""
    settings = load_settings(settings_file or default_settings_file())

    root = Path(steam_root or os.environ.get(STEAM_ROOT_ENV)
                or xdg_data_home() / "Steam").expanduser()
    apps = Path(app_dir or os.environ.get(APP_DIR_ENV)
                or xdg_data_home() / "applications").expanduser()

    rules = SkipRules.build(
        keywords=settings["skip_keywords"] if skip_keywords is None else skip_keywords,
        app_ids=settings["skip_app_ids"] if skip_app_ids is None else skip_app_ids,
    )
    return ShelfConfig(
        steam_root=root,
        app_dir=apps,
        icon_cache_dir=root / "appcache" / "librarycache",
        rules=rules,
        dry_run=dry_run,
    )
