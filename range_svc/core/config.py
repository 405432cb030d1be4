"""
Configuration module for the Range Service API.
Uses Pydantic BaseSettings for validation - app fails fast if required config is missing.
"""
import logging

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with validation.
    Required fields will cause the app to fail fast if not provided.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    range_svc_host: str = Field(default="0.0.0.0", description="API host")
    range_svc_port: int = Field(default=8000, description="API port")
    range_svc_reload: bool = Field(default=False, description="Enable hot reload")

    # Classification
    range_svc_high_inclusive: bool = Field(
        default=True,
        description="Whether a value equal to a band's upper bound belongs to that band",
    )

    # Stacked chart layout defaults
    range_svc_axis_extent: float = Field(default=70.0, gt=0, description="Total height shared by band rows")
    range_svc_column_spacing: float = Field(default=43.0, gt=0, description="Horizontal distance between samples")
    range_svc_column_offset: float = Field(default=10.0, description="x of the first sample")
    range_svc_connector_stroke: str = Field(default="#888888", description="Connector stroke color")
    range_svc_connector_dash: str = Field(default="2,2", description="Connector dash pattern")

    # API Authentication Configuration
    range_svc_api_key: str = Field(
        ...,  # Required - no default means fail fast if missing
        description="API key for authenticating requests to the Range Service API",
        min_length=32,
    )

    @model_validator(mode="after")
    def warn_on_exclusive_bounds(self) -> "Settings":
        if not self.range_svc_high_inclusive:
            logger.warning(
                "RANGE_SVC_HIGH_INCLUSIVE is off - values equal to a band's upper bound "
                "will classify into the next band"
            )
        return self


# Create global settings instance - fails fast if required config is missing
settings = Settings()

# Backwards-compatible exports for existing code
API_HOST = settings.range_svc_host
API_PORT = settings.range_svc_port
API_RELOAD = settings.range_svc_reload

API_KEY = settings.range_svc_api_key
