from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import logging
import os
from pathlib import Path

_logger = logging.getLogger(__name__)

# Look for .env in the project root (parent of the lexibridge package)
project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    # Fallback to current directory
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=False)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")


def normalize_database_url(database_url: str) -> str:
    """
    Normalize a database URL for SQLAlchemy.

    Hosting providers often hand out postgres:// URLs, which SQLAlchemy no
    longer accepts; they are rewritten to postgresql://.

    Args:
        database_url: The raw database URL

    Returns:
        The URL with a SQLAlchemy-compatible scheme
    """
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql://", 1)
    return database_url


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Database
    database_url: str = ""
    database_echo: bool = False
    database_pool_size: int = 5
    database_max_overflow: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        # Ensure we read DATABASE_URL from environment (providers set it uppercase)
        if not kwargs.get("database_url"):
            kwargs["database_url"] = os.getenv("DATABASE_URL", "")
        super().__init__(**kwargs)
        self.database_url = normalize_database_url(self.database_url)


# Create settings instance
settings = Settings()
