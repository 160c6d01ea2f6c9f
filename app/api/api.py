from fastapi import APIRouter
from app.schemas.common import HealthResponse

api_router = APIRouter()

@api_router.get("/health", tags=["health"], response_model=HealthResponse)
async def health_check():
    return HealthResponse()
