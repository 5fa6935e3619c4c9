from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Shopfront API"
    API_PREFIX: str = "/api"
    DATABASE_URL: str = "sqlite:///./shopfront.db"

    # Auth
    SECRET_KEY: str = "supersecretkey_change_me_in_production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 # 1 day
    AUTH_HEADER: str = "x-auth-token"

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Seed admin account (used by seed_data.py)
    ADMIN_NAME: str = "Admin"
    ADMIN_EMAIL: str = "admin@shopfront.local"
    ADMIN_PASSWORD: str = "change_me"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
