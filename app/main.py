import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.api.api import api_router
from app.api.endpoints import orders
from app.core.supabase import db
from app.schemas.common import MessageResponse
from app.services.order_service import OrderService
from app.services.order_store import OrderStore
from app.services.payment_service import PaymentService

# Logging Configuration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.order_service = OrderService(
        payment_service=PaymentService(),
        store=OrderStore(),
    )

    # A store that is down at startup is not fatal; requests that need it fail with 500.
    try:
        await db.connect()
    except Exception as e:
        logger.error(f"Failed to initialize Supabase client: {e}")
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS] or ["*"],
    allow_credentials=bool(settings.BACKEND_CORS_ORIGINS),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body"},
    )

# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": str(exc)},
    )

# Include Router
app.include_router(api_router, prefix=settings.API_V1_STR)
app.include_router(orders.router, tags=["orders"])

@app.get("/", response_model=MessageResponse)
async def root():
    return MessageResponse(message="Payment order relay is running")


def run() -> None:
    import uvicorn

    logger.info(f"Server running on http://localhost:{settings.PORT}")
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
