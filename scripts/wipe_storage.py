#!/usr/bin/env python3
"""Wipe the collector's transient storage from the command line.

Clears the hot intake directory and the tmp working directory, keeping their
sentinel files. Meant for recovery after failed ingestions left large files
behind, without restarting the collector service. Paths default to the
configured settings (``NODE_ENV``, ``STORAGE_DIR``, ``HOT_DIR``, ``TMP_DIR``).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from app.utils.config import Settings, StorageConfigError
from domains.file_ingest.storage import wipe_collector_storage


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--storage-dir",
        type=Path,
        default=None,
        help="Storage base containing hotdir/ and tmp/. Overrides STORAGE_DIR.",
    )
    parser.add_argument(
        "--hot-dir",
        type=Path,
        default=None,
        help="Explicit hot directory to clear.",
    )
    parser.add_argument(
        "--tmp-dir",
        type=Path,
        default=None,
        help="Explicit tmp directory to clear.",
    )
    parser.add_argument(
        "--development",
        action="store_true",
        help="Use the in-repository development layout.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every skipped or undeletable entry.",
    )

    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Overlay command line options on top of the environment settings."""

    overrides = {}
    if args.storage_dir is not None:
        overrides["storage_dir"] = args.storage_dir
    if args.hot_dir is not None:
        overrides["hot_dir"] = args.hot_dir
    if args.tmp_dir is not None:
        overrides["tmp_dir"] = args.tmp_dir
    if args.development:
        overrides["environment"] = "development"

    return Settings(**overrides)


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the CLI script."""

    args = parse_args(argv)

    logger.remove()
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} [{level}] {message}",
        level="DEBUG" if args.verbose else "INFO",
    )

    try:
        layout = build_settings(args).storage_layout()
    except StorageConfigError as e:
        logger.error(f"{e} (or pass --storage-dir)")
        return 1

    removed = asyncio.run(wipe_collector_storage(layout))
    logger.info(f"Removed {removed} entries from {layout.hot_dir} and {layout.tmp_dir}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI bridge
    sys.exit(main())
