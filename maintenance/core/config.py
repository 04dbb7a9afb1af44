"""Application configuration: process settings from env and the JSON database descriptor."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

# Token signing uses a shared symmetric key, so only the HMAC family is accepted.
HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class ConfigError(RuntimeError):
    """Raised when the database config file is missing or malformed."""


class DatabaseConfig(BaseModel):
    """Connection descriptor read from database.json."""

    model_config = {"extra": "ignore"}

    database: str = Field(..., description="Database (schema) name.")
    username: str = Field(..., description="Database user.")
    password: SecretStr = Field(default=SecretStr(""), description="Database password.")
    host: str = Field(default="localhost", description="Database host.")
    port: int = Field(default=5432, ge=1, le=65535, description="Database port.")
    driver: str = Field(
        default="postgresql+psycopg2",
        description="SQLAlchemy driver name, e.g. postgresql+psycopg2 or mysql+pymysql.",
    )

    @classmethod
    def from_file(cls, path: str | Path) -> "DatabaseConfig":
        """Read and validate a JSON config file. Raises ConfigError on any failure."""
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read database config {path}: {e.strerror}") from e
        try:
            return cls.model_validate(json.loads(raw))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Database config {path} is not valid JSON: {e.msg}") from e
        except ValidationError as e:
            raise ConfigError(f"Database config {path} is invalid: {e}") from e

    def url(self) -> URL:
        """Render the driver-specific connection URL (credentials are escaped)."""
        return URL.create(
            drivername=self.driver,
            username=self.username,
            password=self.password.get_secret_value() or None,
            host=self.host,
            port=self.port,
            database=self.database,
        )


class Settings(BaseSettings):
    """Validated process settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False

    # HTTP listener used by maintenance.server
    HOST: str = "localhost"
    PORT: int = 3000

    # Either a full SQLAlchemy URL, or the path of the JSON descriptor rendered into one
    DATABASE_URL: str | None = None
    DATABASE_CONFIG_PATH: str = "database.json"

    # Token signing: the key file is read on every sign/verify, never cached
    JWT_KEY_PATH: str = "private.key"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 30
    JWT_ISSUER: str = "maintenance-master"

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("DATABASE_CONFIG_PATH", "JWT_KEY_PATH")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("path settings must be non-empty")
        return v.strip()

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        s = (v or "").strip().upper()
        if s not in HMAC_ALGORITHMS:
            raise ValueError(f"JWT_ALGORITHM must be one of {list(HMAC_ALGORITHMS)}")
        return s

    @field_validator("JWT_EXPIRE_MINUTES")
    @classmethod
    def validate_jwt_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 10080:
            raise ValueError(
                "JWT_EXPIRE_MINUTES must be between 1 and 10080 (1 min to 7 days)"
            )
        return v

    @field_validator("JWT_ISSUER")
    @classmethod
    def validate_jwt_issuer(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ISSUER must be set and non-empty")
        return v.strip()

    def database_url(self) -> URL:
        """DATABASE_URL when set, else the URL rendered from DATABASE_CONFIG_PATH."""
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        return DatabaseConfig.from_file(self.DATABASE_CONFIG_PATH).url()


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()
