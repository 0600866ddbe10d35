from fastapi import APIRouter

from .endpoints.axes import router as axes_router
from .endpoints.ballot import router as ballot_router
from .endpoints.health import router as health_router
from .endpoints.profile import router as profile_router
from .endpoints.values import router as values_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "Civic Blueprint API is running"}


api_router.include_router(health_router)
api_router.include_router(values_router)
api_router.include_router(axes_router)
api_router.include_router(profile_router)
api_router.include_router(ballot_router)
