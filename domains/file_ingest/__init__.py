"""
File Ingestion Domain

Glue between uploaded/crawled files and the text extraction pipeline:
- Classification → Decide whether a file is worth text extraction
- Documents → Persist normalized records under the documents root
- Transient storage → Clear the hot intake and tmp working directories
"""

__all__ = ["processors", "storage"]
