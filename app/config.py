"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_title: str = Field(default="Vhara Bari")
    api_version: str = Field(default="1.0.0")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)

    # MongoDB
    db_user: Optional[str] = Field(default=None, description="MongoDB user")
    db_password: Optional[str] = Field(default=None, description="MongoDB password")
    db_cluster_host: str = Field(default="cluster0.fuichu5.mongodb.net")
    database_url: Optional[str] = Field(default=None, description="Full MongoDB connection string")
    database_name: str = Field(default="vharaBari")

    # JWT Configuration
    access_token_secret: str = Field(default="development-secret-key-change-in-production", description="JWT secret key")
    jwt_algorithm: str = Field(default="HS256")
    jwt_access_token_expire_minutes: int = Field(default=60)

    # Payment gateway (Stripe)
    payment_secret_key: Optional[str] = Field(default=None, description="Stripe secret key")
    payment_currency: str = Field(default="bdt")
    payment_method_types: str | List[str] = Field(default="card")

    # CORS
    cors_origins: str | List[str] = Field(default="*")
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(default=["*"])
    cors_allow_headers: List[str] = Field(default=["*"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return ["*"]
            return [origin.strip() for origin in v.split(",")]
        elif v is None:
            return ["*"]
        return v

    @field_validator("payment_method_types", mode="before")
    @classmethod
    def parse_payment_method_types(cls, v):
        """Parse payment method types from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return ["card"]
            return [method.strip() for method in v.split(",")]
        elif v is None:
            return ["card"]
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def mongo_uri(self) -> str:
        """Connection string for the MongoDB cluster."""
        if self.database_url:
            return self.database_url
        if self.db_user and self.db_password:
            return (
                f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_password)}"
                f"@{self.db_cluster_host}/?retryWrites=true&w=majority"
            )
        return "mongodb://localhost:27017"

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        required_vars = [
            "access_token_secret",
            "payment_secret_key",
        ]

        missing_vars = []
        for var in required_vars:
            if not getattr(self, var, None):
                missing_vars.append(var.upper())

        if not self.database_url and not (self.db_user and self.db_password):
            missing_vars.append("DATABASE_URL or DB_USER/DB_PASSWORD")

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings


# Create a global settings instance
settings = get_settings()
