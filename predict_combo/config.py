from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    api_key: str | None = os.getenv("API_KEY")
    api_base: str = os.getenv("API_BASE", "http://127.0.0.1:8000")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", 8000))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
