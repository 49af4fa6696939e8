from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront API"
    DATABASE_URL: str = "sqlite:///./storefront.db"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Cart policy: when enabled, "-" on a row at qty 0 is a no-op
    CART_QTY_FLOOR_AT_ZERO: bool = False

    # Tries for /cart/merge when its serializable transaction loses a race
    CART_MERGE_ATTEMPTS: int = 5

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
