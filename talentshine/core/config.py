import logging
from typing import Annotated, List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Application Information
    app_name: str = Field(default="Talent Shine BD")
    app_description: str = Field(default="Online course marketplace")
    app_version: str = Field(default="1.0.0")
    welcome_message: str = Field(default="Welcome to Talent Shine BD Server")
    debug: bool = Field(default=False)
    production: bool = Field(default=False)
    timezone: str = Field(default="UTC")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)

    # Database Configuration
    db_connection: str = Field(default="postgresql+psycopg2")
    db_host: str = Field(default="127.0.0.1")
    db_port: int = Field(default=5432)
    db_database: str = Field(default="talentshine")
    db_username: str = Field(default="talentshine")
    db_password: str = Field(default="")
    database_url: Optional[str] = Field(default=None)

    # Security Settings
    cors_allowed_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:5173"]
    )
    rate_limit_enabled: bool = Field(default=True)
    rate_limit_storage_uri: str = Field(default="memory://")
    rate_limit_default: str = Field(default="100/minute")

    # Payment
    currency_symbol: str = Field(default="৳")

    # Seed data
    courses_seed_file: Optional[str] = Field(default=None)

    # Logging
    log_file: str = Field(default="logs/app.log")

    @staticmethod
    def _parse_csv(value, default):
        if isinstance(value, str):
            items = [x.strip() for x in value.split(",") if x.strip()]
            return items if items else default
        if isinstance(value, list):
            return value
        return default

    @field_validator("cors_allowed_origins", mode="before")
    def validate_cors(cls, v):
        return cls._parse_csv(v, ["http://localhost:5173"])

    @property
    def sqlalchemy_url(self) -> str:
        """Full connection URL, built from the db_* credentials unless overridden."""
        if self.database_url:
            return self.database_url
        return "{driver}://{user}:{password}@{host}:{port}/{database}".format(
            driver=self.db_connection,
            user=self.db_username,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_settings():
    try:
        settings = Settings()
        logger.debug("Settings loaded successfully")
        return settings
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        raise


settings = load_settings()
