"""Configuration of the MongoDB storage using Pydantic Settings.

Values are read from environment variables prefixed with ``OAUTH2_STORAGE_``
or from a ``.env`` file in the working directory.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oauth2storage.monitoring import to_level


class Settings(BaseSettings):
    """Connection parameters and collection names of a storage."""

    model_config = SettingsConfigDict(
        env_prefix="OAUTH2_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    mongodb_uri: str = Field(
        default="mongodb://localhost:27017",
        description="Connection string passed to MongoClient",
    )

    database: str = Field(
        default="oauth2",
        description="Name of the database holding the collections",
    )

    clients_collection: str = Field(default="oauth_clients")
    authorize_collection: str = Field(default="oauth_authorize_data")
    access_collection: str = Field(default="oauth_access_data")

    driver_log_level: str | None = Field(
        default=None,
        description="Log every driver command at this level, e.g. DEBUG",
    )

    @field_validator("driver_log_level")
    @classmethod
    def validate_driver_log_level(cls, v: str | None) -> str | None:
        """Reject names the logging module does not know."""
        if v is None:
            return v
        to_level(v)
        return v.upper()
