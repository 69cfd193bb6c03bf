"""
Text/binary classification for incoming files.

Decides whether downstream text extraction should attempt a file. Anything
not known to be binary is allowed, so new text-like extensions work without
an update.
"""

from os import PathLike
from pathlib import Path
from typing import Union

from loguru import logger

from domains.file_ingest.processors.mime import MediaType, resolve_type

# Primary classes that can never be forced into text
NON_TEXT_PRIMARY_TYPES = frozenset({"multipart", "image", "model", "audio", "video"})

# Full types we cannot parse or interpret as text documents
BINARY_MEDIA_TYPES = frozenset({
    "application/octet-stream",
    "application/zip",
    "application/pkcs8",
    "application/vnd.microsoft.portable-executable",
    "application/x-msdownload",
})


def is_text_media_type(media_type: MediaType) -> bool:
    """Apply the deny-list policy to an already resolved media type."""
    if media_type.full in BINARY_MEDIA_TYPES:
        return False
    if media_type.primary in NON_TEXT_PRIMARY_TYPES:
        return False
    return True


def is_text_type(filepath: Union[str, PathLike]) -> bool:
    """
    Check whether a file should be treated as text-ingestible.

    Args:
        filepath: Path to the candidate file

    Returns:
        False for missing files, known binary containers and non-text
        primary types; True otherwise
    """
    if not Path(filepath).exists():
        return False

    try:
        media_type = resolve_type(filepath)
    except Exception as e:
        logger.debug(f"Could not resolve media type for {filepath}: {e}")
        return False

    return is_text_media_type(media_type)
