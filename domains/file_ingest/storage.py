"""
Collector storage management.

Persists normalized document records under the documents root and clears
the transient hot and tmp directories used during ingestion.

Documents always live exactly one directory below the documents root, so
the returned ``<folder>/<name>.json`` locator can be turned back into an
absolute path by prefixing the root.
"""

import asyncio
import json
import os
from os import PathLike
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Optional, Union

from loguru import logger

from app.utils.config import StorageConfigError, StorageLayout, get_settings

HOT_DIR_SENTINEL = "__HOTDIR__.md"
TMP_DIR_SENTINEL = ".placeholder"


class DocumentLocationError(ValueError):
    """Raised when a document would be written outside the one-level layout."""


def _default_layout() -> StorageLayout:
    return get_settings().storage_layout()


def _check_filename(filename: str) -> None:
    if not filename or filename in (".", ".."):
        raise DocumentLocationError(f"Invalid document filename: {filename!r}")
    if "/" in filename or os.sep in filename or (os.altsep and os.altsep in filename):
        raise DocumentLocationError(
            f"Document filename must not contain path separators: {filename!r}"
        )


def write_to_server_documents(
    data: Optional[Mapping[str, Any]],
    filename: str,
    destination_override: Optional[Union[str, PathLike]] = None,
    *,
    layout: Optional[StorageLayout] = None,
) -> Dict[str, Any]:
    """
    Write a document record as pretty-printed JSON.

    Args:
        data: Record to persist (None is treated as an empty record)
        filename: Target name without the ``.json`` extension
        destination_override: Folder to write into instead of the default
            custom-documents folder; must sit directly under the documents root
        layout: Storage layout, defaults to the one derived from settings

    Returns:
        A copy of ``data`` with a ``location`` locator added

    Raises:
        DocumentLocationError: If the folder is not one level below the
            documents root or the filename is not a plain name
        OSError: If the folder cannot be created or the file written
    """
    record = dict(data or {})
    _check_filename(filename)

    if destination_override is not None:
        destination = Path(destination_override).expanduser().resolve()
        if layout is None:
            try:
                layout = _default_layout()
            except StorageConfigError as e:
                # An explicit folder does not need the configured storage base
                logger.debug(f"Writing to {destination} without a storage layout: {e}")
    else:
        layout = layout or _default_layout()
        destination = layout.custom_documents_dir.resolve()

    if layout is not None:
        documents_root = layout.documents_root.resolve()
        if destination.parent != documents_root:
            raise DocumentLocationError(
                f"Documents must be stored exactly one folder below {documents_root}, "
                f"got {destination}"
            )

    payload = json.dumps(record, indent=4, ensure_ascii=False)

    destination.mkdir(parents=True, exist_ok=True)
    destination_file = destination / f"{filename}.json"
    destination_file.write_text(payload, encoding="utf-8")
    logger.debug(f"Wrote document {destination_file}")

    record["location"] = f"{destination.name}/{destination_file.name}"
    return record


def _sweep_directory(directory: Path, sentinels: FrozenSet[str]) -> int:
    """Remove every entry of ``directory`` except ``sentinels``; best effort."""
    try:
        entries = os.listdir(directory)
    except OSError as e:
        logger.debug(f"Skipping wipe of {directory}: {e}")
        return 0

    removed = 0
    for name in entries:
        if name in sentinels:
            continue
        try:
            os.remove(directory / name)
            removed += 1
        except OSError as e:
            logger.debug(f"Could not remove {directory / name}: {e}")

    return removed


async def wipe_collector_storage(layout: Optional[StorageLayout] = None) -> int:
    """
    Clear the hot and tmp directories, keeping their sentinel files.

    Used to recover after large ingestion failures left orphaned files
    behind. Both directories are swept concurrently and the call returns
    once both are done. Missing directories and undeletable files are
    skipped; this never raises.

    Returns:
        Number of entries removed
    """
    if layout is None:
        try:
            layout = _default_layout()
        except StorageConfigError as e:
            logger.error(f"Cannot wipe collector storage: {e}")
            return 0

    hot_dir = Path(layout.hot_dir).resolve()
    tmp_dir = Path(layout.tmp_dir).resolve()
    if hot_dir == tmp_dir:
        # One shared directory: sweep once so neither sentinel is removed
        sweeps = [
            asyncio.to_thread(
                _sweep_directory, hot_dir, frozenset({HOT_DIR_SENTINEL, TMP_DIR_SENTINEL})
            ),
        ]
    else:
        sweeps = [
            asyncio.to_thread(_sweep_directory, hot_dir, frozenset({HOT_DIR_SENTINEL})),
            asyncio.to_thread(_sweep_directory, tmp_dir, frozenset({TMP_DIR_SENTINEL})),
        ]

    results = await asyncio.gather(*sweeps, return_exceptions=True)

    removed = 0
    for result in results:
        if isinstance(result, BaseException):
            logger.warning(f"Storage sweep failed: {result}")
            continue
        removed += result

    logger.info("Collector hot directory and tmp storage wiped!")
    return removed
