from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Application metadata
    PROJECT_NAME: str = "Fleet Inventory"
    PROJECT_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API settings
    API_PREFIX: str = "/api"

    # Server settings (used when running main.py directly)
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS settings
    BACKEND_CORS_ORIGINS: str = "http://localhost:5173,http://localhost:5000"

    # Feature flags
    SEED_SAMPLE_DATA: bool = True

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse the CORS origins string into a list."""
        return [origin.strip() for origin in self.BACKEND_CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env files

settings = Settings()
