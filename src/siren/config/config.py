"""Configuration settings for the SIREN incident service."""

from functools import lru_cache

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from the environment or a `.env` file.

    The oracle API key and the document database connection string are the
    only secrets; everything else has a working default for local runs.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # Application settings
    app_name: str = Field(default="SIREN Incident API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Environment (development, staging, production)")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8080, description="API port")
    cors_origins: list[str] = Field(default=["*"], description="CORS allowed origins")

    # Oracle (Gemini generateContent) settings
    gemini_api_key: SecretStr | None = Field(default=None, description="Gemini API key")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta", description="Gemini REST base URL"
    )
    gemini_model: str = Field(default="gemini-2.5-flash", description="Gemini model used for extraction")
    oracle_timeout: float = Field(default=30.0, gt=0, description="Oracle request timeout in seconds")
    oracle_json_mode: bool = Field(default=True, description="Ask the oracle for application/json output")

    # Storage settings
    storage_backend: str = Field(default="mongo", description="Record store backend (mongo or memory)")
    mongodb_uri: str = Field(default="mongodb://localhost:27017", description="MongoDB connection string")
    mongodb_database: str = Field(default="siren", description="MongoDB database name")
    mongodb_collection: str = Field(default="ecases", description="MongoDB collection holding incident records")
    mongodb_timeout_ms: int = Field(default=5000, description="MongoDB server selection timeout in milliseconds")

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str | None = Field(default=None, description="Log file path")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = ["development", "dev", "local", "test", "staging", "stage", "production", "prod"]
        if v.lower() not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, v: str) -> str:
        allowed = ["mongo", "memory"]
        if v.lower() not in allowed:
            raise ValueError(f"Storage backend must be one of: {allowed}")
        return v.lower()

    @computed_field
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment in ("development", "dev", "local")

    @computed_field
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment in ("production", "prod")

    def get_cors_settings(self) -> dict:
        """
        Get CORS settings based on environment.

        Returns:
            dict: CORS configuration
        """
        return {
            "allow_origins": self.cors_origins,
            "allow_credentials": "*" not in self.cors_origins,
            "allow_methods": ["GET", "POST", "DELETE", "OPTIONS"],
            "allow_headers": ["*"],
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
