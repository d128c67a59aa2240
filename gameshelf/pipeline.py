import logging
import time
from typing import List, Optional

from . import ShelfConfig
from .desktop import build_descriptor, prune_stale, write_descriptor
from .errors import MalformedRecordError, WriteError
from .filtering import is_skipped
from .icons import find_icon
from .library import resolve_library_roots
from .models import LibraryRoot, ScanReport
from .scanning import scan_library

logger = logging.getLogger(__name__)

def run(config: ShelfConfig, roots: Optional[List[LibraryRoot]] = None) -> ScanReport:
    """Resolve libraries, scan manifests, filter, and write (or preview) launchers.

    `roots` skips resolution when the caller already resolved them.
    ConfigurationError from the resolver propagates before anything is written.
    A failed write is logged and counted; the remaining games are still processed.
    """
    started = time.monotonic()
    report = ScanReport()
    report.roots = roots if roots is not None else resolve_library_roots(config.config_path)

    generated: List[str] = []
    malformed: List[MalformedRecordError] = []

    for root in report.roots:
        for record in scan_library(root, malformed):
            if is_skipped(record, config.rules):
                logger.info("  Found tool/runtime, skipping: %s", record.name)
                report.skipped.append(record.name)
                continue

            icon = find_icon(record.appid, config.icon_cache_dir)
            descriptor = build_descriptor(record, icon)
            generated.append(descriptor.filename)

            if config.dry_run:
                logger.info("  Found game: %s (AppID: %s)", record.name, record.appid)
                report.previewed.append(record.appid)
                continue

            try:
                write_descriptor(descriptor, config.app_dir, dry_run=False)
            except WriteError as e:
                logger.warning("  Could not write launcher for %s: %s", record.name, e)
                report.failed.append(record.appid)
                continue
            logger.info("  Created launcher for %s", record.name)
            report.created.append(record.appid)

    if not config.dry_run:
        report.pruned = prune_stale(config.app_dir, generated)

    report.malformed = len(malformed)
    report.elapsed = time.monotonic() - started
    return report
