"""Application configuration."""

import os
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    db_user: str
    db_pwd: str
    db_host: str
    db_scheme: str = "mongodb+srv"
    db_name: str = "CostumeConnectionsDb"
    costumes_collection: str = "costumes"
    port: int = 8888
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def mongo_uri(self) -> str:
        """Connection string built from the database credentials."""
        user = quote_plus(self.db_user)
        password = quote_plus(self.db_pwd)
        return f"{self.db_scheme}://{user}:{password}@{self.db_host}/"
