"""
Admin endpoints for collector maintenance.

Includes:
- Transient storage wipe
"""

from fastapi import APIRouter
from loguru import logger

from app.models.schemas import WipeResponse
from domains.file_ingest.storage import wipe_collector_storage

router = APIRouter()


@router.post("/wipe-storage", response_model=WipeResponse)
async def wipe_storage():
    """
    Clear the hot and tmp directories, keeping their sentinel files.

    Returns:
        Number of removed entries
    """
    logger.info("Storage wipe triggered")
    removed = await wipe_collector_storage()

    return WipeResponse(
        status="completed",
        message="Collector hot directory and tmp storage wiped",
        removed=removed,
    )
