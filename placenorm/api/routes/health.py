"""GET /health — liveness check with the loaded replacement table size."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from placenorm.core.settings import get_settings
from placenorm.normalization.place_normalizer import Normalizer, get_normalizer

router = APIRouter(tags=["health"])


@router.get("/health", summary="Basic health check")
def health_check(normalizer: Normalizer = Depends(get_normalizer)) -> dict[str, str | int]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "character_replacements": len(normalizer.replacements),
    }
