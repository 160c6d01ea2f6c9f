from typing import Optional
from fastapi import Depends, Request
from app.core.security import get_current_user_conditional, TokenData
from app.services.order_service import OrderService

# The gateway client and the store are process-wide singletons built once in
# the app lifespan (see app.main). Handlers receive them through these
# providers so tests can swap them with app.dependency_overrides.

def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service

async def get_optional_user(
    current_user: Optional[TokenData] = Depends(get_current_user_conditional),
) -> Optional[TokenData]:
    return current_user
