"""
Application configuration management using Pydantic Settings.
Handles environment variables, the optional .env file and default values.
"""

from datetime import datetime
from typing import Literal, Optional
from urllib.parse import quote_plus

import pytz
from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hintanyt.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # MongoDB Configuration
    api_key: SecretStr = Field(description="Secret used in the MongoDB connection string")
    mongo_user: str = Field(default="dutchystuff", description="MongoDB user name")
    mongo_host: str = Field(default="data.pgkic.mongodb.net", description="MongoDB SRV host")
    mongo_app_name: str = Field(default="data", description="Application name reported to MongoDB")
    database_name: str = Field(default="electricity_data", description="Database holding the price documents")
    collection_name: str = Field(default="prices", description="Collection holding the price documents")

    # Price Extraction Configuration
    target_year: Optional[str] = Field(
        default=None,
        description="Year key read from each hour slot. Defaults to the current year."
    )
    record_filter: Literal["shape", "positional"] = Field(
        default="shape",
        description="How non-price records are discarded: by record shape or by position"
    )

    # Display Configuration
    display_timezone: Optional[str] = Field(
        default=None,
        description="Timezone for the current hour (e.g. Europe/Helsinki). Defaults to system local time."
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: Literal["json", "text"] = Field(default="text", description="Log format (json/text)")

    @field_validator("display_timezone")
    @classmethod
    def _known_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone '{value}'")
        return value

    @property
    def mongo_url(self) -> str:
        """MongoDB SRV connection string built from the secret and host settings."""
        return (
            f"mongodb+srv://{quote_plus(self.mongo_user)}:"
            f"{quote_plus(self.api_key.get_secret_value())}@{self.mongo_host}/"
            f"{self.database_name}?retryWrites=true&w=majority&appName={self.mongo_app_name}"
        )

    def resolved_target_year(self, now: Optional[datetime] = None) -> str:
        """Return the configured target year, falling back to the current year."""
        if self.target_year:
            return self.target_year
        return str((now or datetime.now()).year)


def load_settings(**overrides) -> Settings:
    """
    Build the settings once at startup.

    Raises:
        ConfigurationError: If the secret is missing or a value is invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(f"Invalid or missing settings: {', '.join(missing)}") from e
