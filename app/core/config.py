from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import os

load_dotenv()

class Settings(BaseSettings):
    """Defines and validates all environment variables for the application.

    Pydantic automatically reads variables from the environment or a .env file,
    validates their types, and provides default values if they are not set.
    """
    OLLAMA_HOST: str = os.getenv("OLLAMA_HOST", "http://localhost:11434")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "llama3.2:3b")

    # Opaque credential for a hosted model endpoint; sent as a bearer token when set.
    ADVISORY_API_KEY: str = os.getenv("ADVISORY_API_KEY", "")
    ADVISORY_TIMEOUT_SECONDS: float = float(os.getenv("ADVISORY_TIMEOUT_SECONDS", 60))
    ADVISORY_CURRENCY: str = os.getenv("ADVISORY_CURRENCY", "MMK")
    ADVISORY_MARKET: str = os.getenv("ADVISORY_MARKET", "Myanmar")
    ADVISORY_LANGUAGE: str = os.getenv("ADVISORY_LANGUAGE", "Myanmar")

    FRONTEND_BASE_URL: str = os.getenv("FRONTEND_BASE_URL", "http://localhost:3000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = "ignore"

settings = Settings()
