"""
Configuration management using Pydantic Settings.

Environment variables (all prefixed with OWL2JSON_):
- OWL2JSON_ZOOMA_QUERY_URL: ZOOMA query endpoint
- OWL2JSON_ZOOMA_DEFAULT_DATASOURCE: datasource used when -z has no value
- OWL2JSON_ZOOMA_TIMEOUT: HTTP timeout for the ZOOMA query, in seconds
- OWL2JSON_DEFAULT_SYNONYM_URI: synonym annotation property
- OWL2JSON_LOG_LEVEL: logging level name
- OWL2JSON_LOG_JSON: emit log records as JSON lines
- OWL2JSON_JSON_INDENT: indentation of the output document
"""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import (
    DEFAULT_SYNONYM_URI,
    ZOOMA_DEFAULT_DATASOURCE,
    ZOOMA_QUERY_URL,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OWL2JSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ZOOMA Configuration
    zooma_query_url: str = Field(default=ZOOMA_QUERY_URL)
    zooma_default_datasource: str = Field(default=ZOOMA_DEFAULT_DATASOURCE)
    zooma_timeout: float = Field(default=60.0, gt=0)

    # Ontology Loading
    default_synonym_uri: str = Field(default=DEFAULT_SYNONYM_URI)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    # Output
    json_indent: Optional[int] = Field(default=None, ge=0)

    def get_zooma_config(self) -> dict:
        """Get ZOOMA counter configuration as dictionary."""
        return {
            'query_url': self.zooma_query_url,
            'default_datasource': self.zooma_default_datasource,
            'timeout': self.zooma_timeout,
        }


# Global settings instance
settings = Settings()
