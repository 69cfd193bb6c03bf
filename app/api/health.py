"""
Health check endpoint.
"""

from datetime import datetime

from fastapi import APIRouter
from loguru import logger

from app.models.schemas import HealthResponse, StorageStatus
from app.utils.config import StorageConfigError, get_settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Verifies:
    - API is running
    - Hot and tmp directories exist
    """
    settings = get_settings()
    storage = None

    try:
        layout = settings.storage_layout()
        storage = StorageStatus(
            documents=layout.documents_root.is_dir(),
            hotdir=layout.hot_dir.is_dir(),
            tmp=layout.tmp_dir.is_dir(),
        )
    except StorageConfigError as e:
        logger.warning(f"Storage layout unavailable: {e}")

    healthy = storage is not None and storage.hotdir and storage.tmp

    return HealthResponse(
        status="healthy" if healthy else "degraded",
        timestamp=datetime.now(),
        version=settings.api_version,
        storage=storage,
    )
