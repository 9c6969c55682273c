"""Configuration management for the officeconnect plugin.

Uses Pydantic Settings for type-safe, environment-based configuration.
"""

import secrets

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv(override=True)


class Settings(BaseSettings):
    """Plugin settings with environment variable support."""

    # App configuration
    app_name: str = Field("officeconnect", alias="OFFICECONNECT_APP_NAME")
    environment: str = Field("development", alias="OFFICECONNECT_ENVIRONMENT")

    # Logging configuration
    log_level: str = Field("INFO", alias="OFFICECONNECT_LOG_LEVEL")
    log_format: str = Field("text", alias="OFFICECONNECT_LOG_FORMAT")  # text or json
    log_file: str | None = Field(None, alias="OFFICECONNECT_LOG_FILE")

    # Host and document server addresses
    base_url: str = Field("http://localhost", alias="OFFICECONNECT_BASE_URL")
    document_server_url: str | None = Field(None, alias="OFFICECONNECT_DOCUMENT_SERVER_URL")

    # Secret used to sign hashes handed to the document server.
    # Without an explicit value a random one is generated per process.
    secret_key: str = Field(default_factory=lambda: secrets.token_hex(16), alias="OFFICECONNECT_SECRET_KEY")

    editor_display_name: str = Field("Document editor", alias="OFFICECONNECT_EDITOR_NAME")

    # Optional host features. None means "use what the host advertises".
    feature_viewer: bool | None = Field(None, alias="OFFICECONNECT_FEATURE_VIEWER")
    feature_direct_editing: bool | None = Field(None, alias="OFFICECONNECT_FEATURE_DIRECT_EDITING")

    # When true, lookup service failures surface as ServiceUnavailableError
    # instead of being folded into AlreadyProcessedError.
    distinguish_lookup_failures: bool = Field(False, alias="OFFICECONNECT_DISTINGUISH_LOOKUP_FAILURES")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = ["text", "json"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment setting."""
        valid_environments = ["development", "production", "test"]
        if v.lower() not in valid_environments:
            raise ValueError(f"Environment must be one of: {valid_environments}")
        return v.lower()

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Strip the trailing slash so paths can be appended directly."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("document_server_url")
    @classmethod
    def validate_document_server_url(cls, v: str | None) -> str | None:
        """Normalize the document server address to end with a slash."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        return v if v.endswith("/") else v + "/"

    @property
    def document_server_configured(self) -> bool:
        """Whether a document server address has been set."""
        return bool(self.document_server_url)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Build a fresh settings instance from the environment."""
    return Settings()  # type: ignore[call-arg]


# Global settings instance - will be created when first accessed
settings = None


def get_settings_instance() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global settings  # noqa: PLW0603
    if settings is None:
        settings = get_settings()
    return settings
