from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    This class handles all configuration for the tourism agent including
    the third-party lookup endpoints, the HTTP API and logging. Every
    field has a default so the service runs against the public providers
    with no environment at all.
    """

    # Lookup providers
    nominatim_base_url: str = Field(
        default="https://nominatim.openstreetmap.org/search",
        description="Nominatim place search endpoint used for geocoding",
    )
    open_meteo_base_url: str = Field(
        default="https://api.open-meteo.com/v1/forecast",
        description="Open-Meteo forecast endpoint used for current weather",
    )
    overpass_base_url: str = Field(
        default="https://overpass-api.de/api/interpreter",
        description="Overpass interpreter endpoint used for points of interest",
    )
    client_user_agent: str = Field(
        default="TourismApp/1.0",
        description="Identifying User-Agent sent with every lookup",
    )
    lookup_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Timeout applied to each outbound lookup"
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")
    api_token: Optional[str] = Field(default=None, description="API authentication token")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=False, description="Also write logs under ./logs")

    @field_validator("client_user_agent")
    def validate_client_user_agent(cls, v):
        # Nominatim rejects requests without a descriptive caller identity
        if not v or not v.strip():
            raise ValueError("A client User-Agent is required")
        return v.strip()

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    def get_log_directory(self) -> Path:
        """Get the absolute path of the directory log files are written to."""
        return Path("logs").resolve()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()
