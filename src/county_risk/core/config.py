"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables (or a ``.env`` file).
Every field has a default, so a bare ``county-risk run`` reproduces the
standard fetch → join → export pass.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EPI_SOURCE_URL = "https://www.cdc.gov/coronavirus/2019-ncov/json/county-map-data.json"
DEFAULT_DEMOGRAPHIC_SOURCE_URL = "https://raw.githubusercontent.com/balsama/us_counties_data/master/data/counties.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Sources
    epi_source_url: str = Field(
        default=DEFAULT_EPI_SOURCE_URL,
        description="URL of the epidemiological county case/death JSON feed",
    )
    demographic_source_url: str = Field(
        default=DEFAULT_DEMOGRAPHIC_SOURCE_URL,
        description="URL of the demographic county population/area JSON document",
    )
    fetch_timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds for each source fetch",
        gt=0,
    )

    @field_validator("epi_source_url", "demographic_source_url")
    @classmethod
    def validate_source_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = "source URLs must use http:// or https://"
            raise ValueError(msg)
        return v

    # Cache
    epi_cache_path: str = Field(
        default="./data/CDC.json",
        description="Local copy of the last epidemiological payload used",
    )
    demographic_cache_path: str = Field(
        default="./data/Github.json",
        description="Local copy of the last demographic payload used",
    )

    # Output
    risk_json_path: str = Field(
        default="./data/risk.json",
        description="Structured (JSON) output file",
    )
    risk_csv_path: str = Field(
        default="./data/risk.csv",
        description="Tabular (CSV) output file",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
