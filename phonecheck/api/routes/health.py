"""GET /health — liveness check."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from phonecheck.api.deps import get_store
from phonecheck.core.settings import get_settings
from phonecheck.metadata.store import MetadataStore

router = APIRouter(tags=["health"])


@router.get("/health", summary="Basic health check")
def health_check(store: MetadataStore = Depends(get_store)) -> dict[str, str | int]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "metadata_version": store.version,
        "regions": len(store),
    }
