"""
Extension-based media type resolution.

Types are looked up from a static table (the interpreter's built-in
``mimetypes`` table plus a few additions), never by sniffing content, so the
result depends only on the filename.
"""

import os
from dataclasses import dataclass
from mimetypes import MimeTypes
from os import PathLike
from typing import Optional, Tuple, Union

DEFAULT_TYPE = "application/octet-stream"

# Types the built-in table lacks or maps differently
EXTRA_TYPES = {
    ".md": "text/markdown",
    ".mdx": "text/markdown",
    ".markdown": "text/markdown",
    ".csv": "text/csv",
    ".tsv": "text/tab-separated-values",
    ".yaml": "text/yaml",
    ".yml": "text/yaml",
    ".toml": "application/toml",
    ".jsonl": "application/jsonl",
    ".epub": "application/epub+zip",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    ".odt": "application/vnd.oasis.opendocument.text",
    ".zip": "application/zip",
    ".p8": "application/pkcs8",
    ".exe": "application/x-msdownload",
    ".dll": "application/x-msdownload",
    ".com": "application/x-msdownload",
    ".msi": "application/x-msdownload",
    ".efi": "application/vnd.microsoft.portable-executable",
    ".glb": "model/gltf-binary",
    ".gltf": "model/gltf+json",
    ".stl": "model/stl",
    ".3mf": "model/3mf",
    ".webp": "image/webp",
    ".heic": "image/heic",
    ".avif": "image/avif",
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
    ".opus": "audio/ogg",
    ".mkv": "video/x-matroska",
    ".webm": "video/webm",
}

# Compression suffixes resolve to their container type
ENCODING_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "br": "application/x-brotli",
    "compress": "application/x-compress",
}


@dataclass(frozen=True, slots=True)
class MediaType:
    """A primary/subtype pair such as ``application/pdf``."""

    primary: str
    subtype: str

    @property
    def full(self) -> str:
        return f"{self.primary}/{self.subtype}"

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """Split ``value`` on the first slash; raises ValueError if malformed."""
        primary, sep, subtype = value.strip().lower().partition("/")
        if not sep or not primary or not subtype:
            raise ValueError(f"Malformed media type: {value!r}")
        return cls(primary=primary, subtype=subtype)

    def __str__(self) -> str:
        return self.full


def _build_table() -> MimeTypes:
    # MimeTypes() only loads the built-in defaults, not /etc/mime.types
    table = MimeTypes()
    for extension, media_type in EXTRA_TYPES.items():
        table.add_type(media_type, extension)
    return table


_TABLE = _build_table()


def _guess(filepath: Union[str, PathLike]) -> Tuple[Optional[str], Optional[str]]:
    if hasattr(_TABLE, "guess_file_type"):
        return _TABLE.guess_file_type(filepath, strict=False)
    # guess_type() parses URLs; a "./" prefix keeps names like "data:x.png"
    # from being read as a scheme
    name = os.path.basename(os.fspath(filepath))
    return _TABLE.guess_type(f"./{name}", strict=False)


def resolve_type(filepath: Union[str, PathLike]) -> MediaType:
    """
    Resolve the media type of ``filepath`` from its extension.

    Args:
        filepath: File path; only the name is inspected

    Returns:
        The resolved MediaType, or ``application/octet-stream`` when the
        extension is unknown
    """
    media_type, encoding = _guess(filepath)
    if encoding is not None:
        media_type = ENCODING_TYPES.get(encoding, DEFAULT_TYPE)
    return MediaType.parse(media_type or DEFAULT_TYPE)
