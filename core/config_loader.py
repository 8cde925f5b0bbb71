from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    DATABASE_URL: str = "sqlite:///./employees.db"
    # JSON list in the environment, e.g. '["http://localhost:5173"]'
    BACKEND_CORS_ORIGINS: List[str] = []

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    # dev convenience, migrations own the schema in production
    CREATE_TABLES_ON_STARTUP: bool = True


settings = Settings()
