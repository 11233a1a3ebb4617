# tennis_league/api/health.py
from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health() -> dict:
    """Liveness probe. Does not touch the database."""
    return {"status": "ok"}
