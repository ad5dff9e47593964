from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./rentbook.db"
    ENV: str = "dev"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "standard"  # standard | json
    SQL_ECHO: bool = False

    # Mobile client dev servers (expo web, metro)
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8081",
        "http://localhost:19006",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
