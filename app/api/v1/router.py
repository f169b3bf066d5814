from fastapi import APIRouter

from app.api.v1.endpoints import ciphers, history, transform

api_router = APIRouter()

api_router.include_router(
    transform.router,
    tags=["Transform"],
)

api_router.include_router(
    ciphers.router,
    tags=["Ciphers"],
)

api_router.include_router(
    history.router,
    prefix="/history",
    tags=["History"],
)
