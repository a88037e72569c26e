from functools import lru_cache
from os import path as os_path

from dotenv import load_dotenv
from pydantic.v1 import BaseSettings, Field, validator

from .exceptions import ConfigurationError


load_dotenv(dotenv_path=os_path.join(os_path.dirname(__file__), "..", "..", "..", ".env"))

# Plain postgres URLs are rewritten to use the async driver
_ASYNC_SCHEMES = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "postgresql+psycopg2": "postgresql+asyncpg",
}
_SUPPORTED_SCHEMES = ("postgresql+asyncpg", "sqlite+aiosqlite")


class Settings(BaseSettings):

    DATABASE_URL: str = Field(..., env=["DATABASE_URL", "POSTGRES_URL"])
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 300

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    class Config:
        allow_mutation = False
        case_sensitive = True

    @validator("DATABASE_URL")
    def toAsyncUrl(cls, value: str) -> str:
        scheme, sep, rest = value.partition("://")
        if not sep:
            raise ConfigurationError(f"DATABASE_URL is not a URL: {value!r}")
        scheme = _ASYNC_SCHEMES.get(scheme, scheme)
        if scheme not in _SUPPORTED_SCHEMES:
            raise ConfigurationError(f"Unsupported database driver '{scheme}'")
        return f"{scheme}://{rest}"

    @validator("LOG_LEVEL")
    def upperLogLevel(cls, value: str) -> str:
        return value.upper()

    @property
    def safe_database_url(self) -> str:
        """DATABASE_URL with any password masked, for logging."""
        scheme, _, rest = self.DATABASE_URL.partition("://")
        credentials, at, location = rest.rpartition("@")
        if not at:
            return self.DATABASE_URL
        user = credentials.split(":", 1)[0]
        return f"{scheme}://{user}:***@{location}"


@lru_cache
def getSettings() -> Settings:
    """Load settings once per process. Raises if DATABASE_URL is missing."""
    return Settings()
