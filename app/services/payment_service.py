import asyncio
import logging
from typing import Optional
import razorpay
from fastapi.concurrency import run_in_threadpool
from app.core.config import settings

logger = logging.getLogger(__name__)

class PaymentGatewayError(Exception):
    pass

class PaymentService:
    def __init__(self, client: Optional[razorpay.Client] = None, timeout: Optional[float] = None):
        self.key_id = settings.RAZORPAY_KEY_ID
        self.key_secret = settings.RAZORPAY_KEY_SECRET
        self.timeout = timeout if timeout is not None else settings.GATEWAY_TIMEOUT_SECONDS

        if client is not None:
            self.client = client
        elif self.key_id and self.key_secret:
            self.client = razorpay.Client(auth=(self.key_id, self.key_secret))
        else:
            self.client = None
            logger.warning("Razorpay keys not set. Payment operations will fail.")

    async def create_order(self, amount: int, currency: str, receipt: str) -> dict:
        """
        Creates an order on Razorpay and returns the gateway's order entity as-is.

        The razorpay SDK is blocking, so the call runs in the threadpool and is
        bounded by the configured gateway timeout.
        """
        if not self.client:
            raise PaymentGatewayError("Razorpay client not initialized")

        data = {
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
        }

        try:
            order = await asyncio.wait_for(
                run_in_threadpool(self.client.order.create, data=data),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"Razorpay order creation timed out after {self.timeout}s (receipt {receipt})")
            raise PaymentGatewayError("Payment gateway timed out")
        except Exception as e:
            logger.error(f"Error creating Razorpay order: {e}")
            raise e

        logger.info(f"Created Razorpay order {order.get('id')} for {amount} {currency}")
        return order
