"""FastAPI endpoints for the Telegram Payment Tracker.

The bot itself talks to Telegram by long polling; the HTTP surface only exposes a health check
for process supervisors.
"""

from fastapi import APIRouter

router = APIRouter()


@router.get(
    "/health",
    summary="Health check",
    description="Simple health check endpoint. Returns status ok.",
    response_description="Status ok.",
    responses={200: {"description": "API is healthy.", "content": {"application/json": {"example": {"status": "ok"}}}}},
)
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
