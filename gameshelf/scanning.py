import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from . import keyvalues
from .errors import MalformedRecordError
from .models import LibraryRoot, PackageRecord

logger = logging.getLogger(__name__)

MANIFEST_GLOB = "appmanifest_*.acf"
MANIFEST_SCOPE = "AppState"

def manifest_attributes(tree: keyvalues.Tree) -> Dict[str, str]:
    """Flatten the AppState scope (or the first top-level scope) into key -> value strings."""
    scope = keyvalues.find_scope(tree, MANIFEST_SCOPE)
    if scope is None:
        scope = next((v for v in tree.values() if isinstance(v, dict)), {})
    return {k: v for k, v in scope.items() if isinstance(v, str)}

def parse_manifest(path: Path) -> PackageRecord:
    try:
        tree = keyvalues.load(path)
    except (OSError, keyvalues.KeyValuesError) as e:
        raise MalformedRecordError(path, str(e))

    attrs = manifest_attributes(tree)
    appid = attrs.get("appid", "").strip()
    name = attrs.get("name", "").strip()
    if not appid:
        raise MalformedRecordError(path, "missing appid")
    if not appid.isdigit():
        raise MalformedRecordError(path, f"appid is not numeric: {appid!r}")
    if not name:
        raise MalformedRecordError(path, "missing name")

    return PackageRecord(appid=appid, name=name,
                         installdir=attrs.get("installdir", ""), manifest=path)

def scan_library(root: LibraryRoot,
                 malformed: Optional[List[MalformedRecordError]] = None) -> List[PackageRecord]:
    """Every usable app manifest under one library root. Order is filesystem order.

    Rejected manifests are logged and, when `malformed` is given, appended to it.
    """
    records: List[PackageRecord] = []
    meta_dir = root.metadata_dir
    if not meta_dir.is_dir():
        logger.info("No steamapps folder in %s, skipping", root.path)
        return records

    logger.info("Checking library: %s", root.path)
    try:
        manifests = [p for p in meta_dir.glob(MANIFEST_GLOB) if p.is_file()]
    except PermissionError as e:
        logger.warning("Cannot list %s: %s", meta_dir, e)
        return records

    for manifest in manifests:
        try:
            records.append(parse_manifest(manifest))
        except MalformedRecordError as e:
            logger.warning("Skipping malformed manifest %s", e)
            if malformed is not None:
                malformed.append(e)
    return records

def scan_libraries(roots: Iterable[LibraryRoot],
                   malformed: Optional[List[MalformedRecordError]] = None) -> List[PackageRecord]:
    records: List[PackageRecord] = []
    for root in roots:
        records.extend(scan_library(root, malformed))
    return records
