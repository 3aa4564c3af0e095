"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="NourishHub", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3001, ge=1, le=65535, description="Server port")

    # Database settings - embedded SQLite file
    database_url: str = Field(
        default="sqlite:///./nourish_hub.db",
        description="SQLAlchemy URL of the embedded SQLite database",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=3, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=1.0, ge=0, description="Delay between DB init attempts"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="/api", description="API route prefix")
    api_title: str = Field(
        default="NourishHub API", description="API documentation title"
    )
    api_description: str = Field(
        default="Campus dining preferences, weekly menu voting and feedback",
        description="API documentation description",
    )

    # Student registry
    auto_register_students: bool = Field(
        default=True,
        description="Register unknown student ids on their first submission",
    )
    student_id_pattern: str = Field(
        default=r"^STU\d{3,}$", description="Regex every student id must match"
    )

    # Voting
    validate_vote_options: bool = Field(
        default=True,
        description="Reject votes for options not configured for that day and meal",
    )

    # Feedback & metrics
    feedback_recent_max: int = Field(
        default=100, ge=1, description="Upper bound for the recent feedback limit"
    )
    expected_daily_headcount: int = Field(
        default=500, ge=1, description="Denominator of the confirmation rate"
    )
    metrics_waste_reduction_pct: Optional[float] = Field(
        default=None,
        description="Manually reported waste reduction percentage (not computed)",
    )
    metrics_cost_savings: Optional[float] = Field(
        default=None,
        description="Manually reported weekly cost savings in rupees (not computed)",
    )

    # Seeding
    seed_sample_data: bool = Field(
        default=True, description="Insert sample students, menu and options on startup"
    )
    seed_demo_preferences: bool = Field(
        default=False, description="Insert random demo preferences for today"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
