"""
File Ingestion Processors

Stateless helpers applied to individual files during ingestion:
- mime.py - Extension-based media type resolution
- classifier.py - Text/binary verdict for text extraction
- files.py - Single-file removal and creation metadata
"""

from domains.file_ingest.processors.classifier import is_text_media_type, is_text_type
from domains.file_ingest.processors.files import created_date, trash_file
from domains.file_ingest.processors.mime import MediaType, resolve_type

__all__ = [
    "MediaType",
    "created_date",
    "is_text_media_type",
    "is_text_type",
    "resolve_type",
    "trash_file",
]
