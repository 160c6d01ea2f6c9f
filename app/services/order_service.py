import math
import time
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Callable, List, Dict
from app.schemas.order import OrderRecordCreate, DEFAULT_CURRENCY
from app.services.payment_service import PaymentService
from app.services.order_store import OrderStore

logger = logging.getLogger(__name__)

RECEIPT_PREFIX = "receipt_"
SUBUNITS_PER_UNIT = 100

class InvalidAmountError(ValueError):
    pass

def parse_amount(value: Any) -> Decimal:
    """
    Parses an amount in major currency units (rupees). Accepts numbers and
    numeric strings; anything missing, non-numeric, non-finite or not strictly
    positive raises InvalidAmountError.
    """
    if value is None or isinstance(value, bool):
        raise InvalidAmountError("Invalid amount received")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidAmountError("Invalid amount received")
    if not isinstance(value, (int, float, str, Decimal)):
        raise InvalidAmountError("Invalid amount received")

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidAmountError("Invalid amount received")

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError("Invalid amount received")
    return amount

def to_subunits(amount: Decimal) -> int:
    # Half-subunits round away from zero: 0.005 -> 1 paisa.
    try:
        return int((amount * SUBUNITS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # More digits than the decimal context can hold.
        raise InvalidAmountError("Invalid amount received")

def make_receipt(clock: Callable[[], float] = time.time) -> str:
    # Millisecond resolution only; same-millisecond requests share a label.
    return f"{RECEIPT_PREFIX}{int(clock() * 1000)}"

class OrderService:
    def __init__(self, payment_service: PaymentService, store: OrderStore):
        self.payment_service = payment_service
        self.store = store

    async def create_order(self, raw_amount: Any) -> dict:
        logger.info(f"Amount received from client: {raw_amount!r}")

        amount = parse_amount(raw_amount)
        subunits = to_subunits(amount)
        if subunits <= 0:
            # Positive but below half a paisa.
            raise InvalidAmountError("Invalid amount received")

        order = await self.payment_service.create_order(
            amount=subunits,
            currency=DEFAULT_CURRENCY,
            receipt=make_receipt(),
        )

        try:
            record = OrderRecordCreate.from_gateway(order)
            await self.store.save(record)
        except Exception as e:
            # No compensation: the gateway order stays without a local record.
            logger.error(f"Razorpay order {order.get('id')} created but not persisted: {e}")
            raise e

        return order

    async def list_orders(self) -> List[Dict[str, Any]]:
        return await self.store.list_recent()
