"""
Application Configuration
"""
from pydantic_settings import BaseSettings
from typing import List, Optional
import warnings


DEFAULT_SECRET_KEY = "mk-trading-secret-key-change-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "M.K. Trading API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database
    DATABASE_URL: str = "sqlite:///./mktrading.db"
    RUN_MIGRATIONS: bool = False  # Create tables on startup

    # Security
    SECRET_KEY: str = DEFAULT_SECRET_KEY
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days

    # Seed login (both must be set)
    ADMIN_USERNAME: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None

    # CORS
    CORS_ORIGINS: str = "*"

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def database_url(self) -> str:
        """Get properly formatted database URL"""
        url = self.DATABASE_URL
        if url.startswith("file:"):
            return f"sqlite:///{url[5:]}"
        # Hosted Postgres providers still hand out the legacy scheme
        if url.startswith("postgres://"):
            return "postgresql://" + url[len("postgres://"):]
        return url

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    def validate_security_settings(self):
        """Validate security settings and warn about insecure defaults"""
        if self.SECRET_KEY == DEFAULT_SECRET_KEY:
            if self.is_production:
                raise ValueError(
                    "CRITICAL: Default SECRET_KEY detected in production! "
                    "Set the SECRET_KEY environment variable to a secure random value."
                )
            warnings.warn(
                "WARNING: Using default SECRET_KEY. "
                "Set SECRET_KEY environment variable for production.",
                UserWarning
            )

        if self.is_production and self.DEBUG:
            raise ValueError(
                "CRITICAL: DEBUG mode is enabled in production! "
                "Set DEBUG=False for production environment."
            )

        return True

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
settings.validate_security_settings()
