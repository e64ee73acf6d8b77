from fastapi import APIRouter, Request

from models.response import HealthResponse
from . import docs

router = APIRouter(tags=["health"])


@router.get("/", response_model=HealthResponse, **docs.HEALTH_CHECK)
async def health_check(request: Request):
    store = request.app.state.store
    database = "connected" if await store.ping() else "disconnected"

    return HealthResponse(
        status="success",
        message="NFT API is running",
        database=database,
    )
