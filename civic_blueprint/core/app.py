from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from civic_blueprint.api.main import api_router
from civic_blueprint.core.exceptions import SpecValidationError, UpstreamScoringError
from civic_blueprint.services.registry import get_default_registry

from .config import settings
from .log import configure_logger
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    configure_logger()
    registry = get_default_registry()
    logger.info(
        f"{settings.APP_NAME} {__version__} starting with spec {registry.version} "
        f"({len(registry.values)} values, {len(registry.axes)} axes)"
    )
    yield
    logger.info(f"{settings.APP_NAME} shutting down")


app = FastAPI(
    title="Civic Blueprint",
    description="Values and policy-axis profile scoring with ballot alignment",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV == "production" else "/docs",
    redoc_url=None if settings.APP_ENV == "production" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UpstreamScoringError)
async def upstream_error_handler(request: Request, exc: UpstreamScoringError) -> JSONResponse:
    logger.error(f"Upstream scoring failed for {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(SpecValidationError)
async def spec_error_handler(request: Request, exc: SpecValidationError) -> JSONResponse:
    logger.exception(f"Spec registry invalid while serving {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Spec registry is invalid"})


app.include_router(api_router)
