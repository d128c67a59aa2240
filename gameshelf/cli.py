import argparse
import logging
import sys
from typing import List, Optional

from . import __version__, create_config
from .errors import ConfigurationError
from .filtering import DEFAULT_SKIP_IDS, DEFAULT_SKIP_KEYWORDS, parse_csv
from .library import resolve_library_roots
from .pipeline import run
from .settings import default_settings_file, save_settings

logger = logging.getLogger("gameshelf")

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_PARTIAL = 2   # only with --strict

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gameshelf",
        description="Create application-menu launchers for installed Steam games.",
    )
    p.add_argument("-n", "--dry-run", action="store_true",
                   help="Discover games without writing any files")
    p.add_argument("-s", "--steam-path",
                   help="Steam installation (default: ~/.local/share/Steam)")
    p.add_argument("-a", "--app-dir",
                   help="Launcher directory (default: ~/.local/share/applications)")
    p.add_argument("-k", "--skip-keywords",
                   help="Comma separated name keywords to skip (default: %s)" % ",".join(DEFAULT_SKIP_KEYWORDS))
    p.add_argument("-i", "--ignored-app-ids",
                   help="Comma separated app ids to skip (default: %s)" % ",".join(DEFAULT_SKIP_IDS))
    p.add_argument("--save-settings", action="store_true",
                   help="Remember the effective skip lists in the settings file")
    p.add_argument("--strict", action="store_true",
                   help="Exit with status 2 if any launcher could not be written")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    config = create_config(
        steam_root=args.steam_path,
        app_dir=args.app_dir,
        skip_keywords=parse_csv(args.skip_keywords) if args.skip_keywords is not None else None,
        skip_app_ids=parse_csv(args.ignored_app_ids) if args.ignored_app_ids is not None else None,
        dry_run=args.dry_run,
    )

    logger.info("Steam root directory: %s", config.steam_root)
    logger.info("Desktop entry directory: %s", config.app_dir)
    logger.info("Icon cache directory: %s", config.icon_cache_dir)

    # nothing is written until the libraries resolve
    try:
        roots = resolve_library_roots(config.config_path)
    except ConfigurationError as e:
        logger.error("Error: %s", e)
        return EXIT_CONFIG

    if args.save_settings:
        save_settings(default_settings_file(), {
            "skip_keywords": list(config.rules.keywords),
            "skip_app_ids": list(config.rules.app_ids),
        })

    if config.dry_run:
        logger.info("DRY RUN ENABLED - no files will be written.")
    else:
        try:
            config.app_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create %s: %s", config.app_dir, e)

    report = run(config, roots)

    ms = report.elapsed * 1000
    if config.dry_run:
        logger.info("Dry run complete. Found %d games, skipped %d tools. Took %.2f ms.",
                    len(report.previewed), len(report.skipped), ms)
    else:
        logger.info("Done! %d shortcuts created (skipped %d tools, %d failed, %d stale removed) in %s. Took %.2f ms.",
                    len(report.created), len(report.skipped), len(report.failed),
                    len(report.pruned), config.app_dir, ms)
    if report.malformed:
        logger.info("%d manifest(s) could not be read.", report.malformed)

    if args.strict and report.failed:
        return EXIT_PARTIAL
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
