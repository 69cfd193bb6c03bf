"""
Pydantic models for the Collector API.

Shared data models across the application.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


# =====================================================
# Storage Models
# =====================================================

class StorageStatus(BaseModel):
    """Existence of the collector storage directories."""
    documents: bool
    hotdir: bool
    tmp: bool


# =====================================================
# Response Models
# =====================================================

class HealthResponse(BaseModel):
    """Health check response model."""
    status: str  # healthy, degraded
    timestamp: datetime
    version: str
    storage: Optional[StorageStatus] = None


class WipeResponse(BaseModel):
    """Storage wipe response."""
    status: str
    message: str
    removed: int = 0

