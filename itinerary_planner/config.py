import os
from typing import List
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    ENV: str = os.getenv("ENV", "development")

    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = os.getenv("PORT", "8000")
    ALLOWED_ORIGINS: List[str] = _split_csv(os.getenv("ALLOWED_ORIGINS", "*"))

    # Gemini
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
    GEMINI_TEMPERATURE: float = os.getenv("GEMINI_TEMPERATURE", "0.7")
    GEMINI_MAX_RETRIES: int = os.getenv("GEMINI_MAX_RETRIES", "1")

    # Reject model output whose day numbering or list sizes break the requested shape
    ITINERARY_STRICT_VALIDATION: bool = os.getenv("ITINERARY_STRICT_VALIDATION", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Allow extra .env variables without throwing validation errors
    model_config = {"extra": "allow", "validate_default": True}

settings = Settings()
