from typing import Any, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

DEFAULT_CURRENCY = "INR"
DEFAULT_STATUS = "created"

class OrderCreateRequest(BaseModel):
    # Left untyped so a bad amount is reported as a 400 by the service,
    # not as a pydantic 422.
    amount: Any = None

class GatewayOrder(BaseModel):
    """Subset of the Razorpay order entity that is persisted locally."""
    model_config = ConfigDict(extra="allow")

    id: str
    amount: int
    currency: str
    status: Optional[str] = None
    receipt: Optional[str] = None

class OrderRecordCreate(BaseModel):
    razorpay_order_id: str
    amount: int
    currency: str = DEFAULT_CURRENCY
    status: str = DEFAULT_STATUS

    @classmethod
    def from_gateway(cls, order: dict) -> "OrderRecordCreate":
        parsed = GatewayOrder.model_validate(order)
        return cls(
            razorpay_order_id=parsed.id,
            amount=parsed.amount,
            currency=parsed.currency,
            status=parsed.status or DEFAULT_STATUS,
        )

class OrderRecord(OrderRecordCreate):
    model_config = ConfigDict(from_attributes=True, extra="allow")

    id: Optional[Any] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
