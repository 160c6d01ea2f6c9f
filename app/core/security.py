from typing import Optional
from jose import jwt, JWTError
from fastapi import HTTPException, status, Depends
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel
from app.core.config import settings

# auto_error is off so the guard can be disabled through settings
oauth2_scheme_optional = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/login",
    auto_error=False,
)

class TokenData(BaseModel):
    id: Optional[str] = None
    email: Optional[str] = None

def _credentials_exception(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

def verify_token(token: str) -> TokenData:
    try:
        # Supabase signs JWTs with the project's JWT Secret
        payload = jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=["HS256"],
            options={"verify_aud": False},
        )
    except JWTError:
        raise _credentials_exception()

    user_id: Optional[str] = payload.get("sub")
    if user_id is None:
        raise _credentials_exception()
    return TokenData(id=user_id, email=payload.get("email"))

def get_current_user_conditional(token: Optional[str] = Depends(oauth2_scheme_optional)) -> Optional[TokenData]:
    """
    Returns the current user when ENABLE_AUTH is on and the bearer token is valid.
    Returns None when auth is disabled.
    """
    if not settings.ENABLE_AUTH:
        return None

    if not token:
        raise _credentials_exception("Not authenticated")
    return verify_token(token)
