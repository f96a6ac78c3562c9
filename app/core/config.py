
from pydantic import BaseModel
import os

class Settings(BaseModel):
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "shop")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Discount milestones
    NTH_ORDER: int = int(os.getenv("NTH_ORDER", "5"))
    DISCOUNT_PERCENT: int = int(os.getenv("DISCOUNT_PERCENT", "10"))

    # HTTP
    CORS_ORIGINS: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    METRICS_ENDPOINT: str = os.getenv("METRICS_ENDPOINT", "/metrics")

    # Logging
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str | None = os.getenv("LOG_LEVEL")

settings = Settings()
