"""
QuickNotes Backend - Health Check Route
=========================================

What:  Health check endpoint for monitoring and container probes.
How:   The store lives in process memory, so the service is healthy as long
       as it answers; the response also reports how many notes are held.
"""

import time

from fastapi import APIRouter, Depends

from quicknotes import __version__
from quicknotes.schemas.note import HealthResponse
from quicknotes.services.note_store import NoteStore
from quicknotes.storage import get_note_store

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns service status, version, note count and uptime.",
)
async def health_check(store: NoteStore = Depends(get_note_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=store.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
