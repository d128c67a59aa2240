from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from jinja2 import Environment, StrictUndefined

from .errors import WriteError
from .models import LauncherDescriptor, PackageRecord
from .templates import DESKTOP_ENTRY

logger = logging.getLogger(__name__)

LAUNCH_COMMAND = "steam steam://rungameid/{appid}"
DESCRIPTOR_GLOB = "steam-*.desktop"

def desktop_escape(value: str) -> str:
    """Escape a string value per the Desktop Entry spec (backslash first)."""
    return (str(value).replace("\\", "\\\\")
            .replace("\n", "\\n")
            .replace("\t", "\\t")
            .replace("\r", "\\r"))

_env = Environment(keep_trailing_newline=True, undefined=StrictUndefined, autoescape=False)
_env.filters["desktop_escape"] = desktop_escape
_template = _env.from_string(DESKTOP_ENTRY)

def build_descriptor(record: PackageRecord, icon: Optional[Path]) -> LauncherDescriptor:
    return LauncherDescriptor(
        appid=record.appid,
        name=record.name,
        exec=LAUNCH_COMMAND.format(appid=record.appid),
        icon=str(icon) if icon else None,
    )

def render_descriptor(descriptor: LauncherDescriptor) -> str:
    return _template.render(d=descriptor)

def write_descriptor(descriptor: LauncherDescriptor, app_dir: Path, dry_run: bool) -> Optional[Path]:
    """Write steam-<appid>.desktop into app_dir, replacing any previous copy.

    Returns the written path, or None in dry-run mode (nothing touched).
    """
    if dry_run:
        return None

    app_dir = Path(app_dir)
    target = app_dir / descriptor.filename
    if not app_dir.is_dir():
        raise WriteError(target, "application directory does not exist")
    try:
        # newline="" keeps "\n" line endings on every platform
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(render_descriptor(descriptor))
    except OSError as e:
        raise WriteError(target, e.strerror or str(e))
    return target

def prune_stale(app_dir: Path, keep: Iterable[str]) -> List[Path]:
    """Remove steam-*.desktop files in app_dir that are not in `keep` (file names)."""
    app_dir = Path(app_dir)
    removed: List[Path] = []
    if not app_dir.is_dir():
        return removed
    keep = set(keep)
    for p in sorted(app_dir.glob(DESCRIPTOR_GLOB)):
        if p.name in keep or not p.is_file():
            continue
        try:
            p.unlink()
        except OSError as e:
            logger.warning("Could not remove stale launcher %s: %s", p, e)
            continue
        logger.info("Removed stale launcher %s", p.name)
        removed.append(p)
    return removed
