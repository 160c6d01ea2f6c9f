import os
import json
from typing import Annotated, List, Union, Optional
from pydantic import AnyHttpUrl, validator
from pydantic_settings import BaseSettings, NoDecode
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Payment Order Relay")
    API_V1_STR: str = os.getenv("API_V1_STR", "/api/v1")

    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
    SUPABASE_JWT_SECRET: str = os.getenv("SUPABASE_JWT_SECRET", "")
    ORDERS_TABLE: str = os.getenv("ORDERS_TABLE", "orders")

    RAZORPAY_KEY_ID: str = os.getenv("RAZORPAY_KEY_ID", "")
    RAZORPAY_KEY_SECRET: str = os.getenv("RAZORPAY_KEY_SECRET", "")
    GATEWAY_TIMEOUT_SECONDS: float = 30.0

    PORT: int = 5000
    ENABLE_AUTH: bool = False

    # CORS; an empty list means any origin
    BACKEND_CORS_ORIGINS: Annotated[List[Union[str, AnyHttpUrl]], NoDecode] = []

    @validator("BACKEND_CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    class Config:
        case_sensitive = True

settings = Settings()
