import logging
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from app.api.deps import get_order_service, get_optional_user
from app.core.security import TokenData
from app.schemas.common import ErrorResponse
from app.schemas.order import OrderCreateRequest, OrderRecord
from app.services.order_service import OrderService, InvalidAmountError

router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/create-order", responses=ERROR_RESPONSES)
async def create_order(
    request: OrderCreateRequest,
    service: OrderService = Depends(get_order_service),
) -> Any:
    """
    Create a Razorpay order and record it locally.

    Accepts: amount in rupees
    Returns: the Razorpay order entity
    """
    try:
        return await service.create_order(request.amount)
    except InvalidAmountError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        logger.error(f"Error creating Razorpay order: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.get("/orders", response_model=List[OrderRecord], responses={500: {"model": ErrorResponse}})
async def list_orders(
    service: OrderService = Depends(get_order_service),
    current_user: Optional[TokenData] = Depends(get_optional_user),
) -> Any:
    """
    List every recorded order, most recent first.
    """
    try:
        return await service.list_orders()
    except Exception as e:
        logger.error(f"Error fetching orders: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
