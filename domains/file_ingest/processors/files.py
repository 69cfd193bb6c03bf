"""Single-file helpers: removal and creation metadata."""

import os
import stat
from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import Union

from loguru import logger

UNKNOWN_DATE = "unknown"


def trash_file(filepath: Union[str, PathLike]) -> None:
    """
    Delete a single file.

    Missing paths and directories are left alone; this never recurses.
    A failure of the delete itself propagates to the caller.
    """
    path = Path(filepath)
    if not path.exists():
        return

    try:
        if stat.S_ISDIR(os.lstat(path).st_mode):
            return
    except OSError:
        return

    path.unlink()
    logger.debug(f"Trashed {path}")


def created_date(filepath: Union[str, PathLike]) -> str:
    """
    Get a locale-formatted creation date for a file.

    Returns ``"unknown"`` when the filesystem does not report birth time
    or the file cannot be stat'ed.
    """
    try:
        birth_time = getattr(os.stat(filepath), "st_birthtime", 0)
        if not birth_time:
            return UNKNOWN_DATE
        return datetime.fromtimestamp(birth_time).strftime("%c")
    except (OSError, ValueError, OverflowError):
        return UNKNOWN_DATE
