from fastapi import APIRouter

from civic_blueprint.core.version import __version__
from civic_blueprint.services.registry import get_default_registry

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple readiness probe")
async def health_check() -> dict[str, str]:
    return {"status": "ok", "version": __version__, "spec_version": get_default_registry().version}
