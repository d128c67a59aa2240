import logging
from pathlib import Path
from typing import List

from . import keyvalues
from .errors import ConfigurationError
from .models import LibraryRoot

logger = logging.getLogger(__name__)

LIBRARY_SCOPE = "libraryfolders"
PATH_KEY = "path"

def resolve_library_roots(config_path: Path) -> List[LibraryRoot]:
    """Library roots declared in libraryfolders.vdf, in document order (duplicates kept)."""
    config_path = Path(config_path)
    try:
        tree = keyvalues.load(config_path)
    except FileNotFoundError:
        raise ConfigurationError(f"library configuration not found: {config_path}")
    except OSError as e:
        raise ConfigurationError(f"cannot read {config_path}: {e}")
    except keyvalues.KeyValuesError as e:
        raise ConfigurationError(f"cannot parse {config_path}: {e}")

    libraries = keyvalues.find_scope(tree, LIBRARY_SCOPE)
    if libraries is None:
        raise ConfigurationError(f"no '{LIBRARY_SCOPE}' scope in {config_path}")

    roots: List[LibraryRoot] = []
    for key, entry in libraries.items():
        if isinstance(entry, dict):
            path = entry.get(PATH_KEY)
            if not isinstance(path, str) or not path:
                raise ConfigurationError(f"library '{key}' in {config_path} has no '{PATH_KEY}'")
        elif key.isdigit():
            # old format: "1"  "/mnt/games/SteamLibrary"
            path = entry
        else:
            # scalar settings such as "contentstatsid"
            continue
        roots.append(LibraryRoot(Path(path)))

    logger.debug("Resolved %d library root(s) from %s", len(roots), config_path)
    return roots
