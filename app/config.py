"""
Application configuration settings.
"""
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List
import os


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - MySQL for production, SQLite for local
    DATABASE_URL: str = ""  # e.g. mysql+pymysql://root:@localhost/barangay_db
    DATABASE_PATH: str = "data/barangay.db"  # SQLite path (local fallback)
    USE_MYSQL: bool = False  # Set to True to use MySQL
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0

    # Authentication
    JWT_SECRET: str = "dev_secret"
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_HOURS: int = 24
    BCRYPT_ROUNDS: int = 10

    # Uploaded official signatures and pictures
    UPLOAD_DIR: str = "uploads"

    # API settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Barangay Records System"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    # History logs
    DEFAULT_LOG_LIMIT: int = 100
    MAX_LOG_LIMIT: int = 1000

    @property
    def database_url(self) -> str:
        """Get database URL - MySQL if configured, else SQLite."""
        if self.USE_MYSQL and self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DATABASE_PATH}"

    @property
    def is_mysql(self) -> bool:
        """Check if using MySQL."""
        return self.USE_MYSQL and bool(self.DATABASE_URL)

    @property
    def signatures_dir(self) -> str:
        return os.path.join(self.UPLOAD_DIR, "signatures")

    @property
    def pictures_dir(self) -> str:
        return os.path.join(self.UPLOAD_DIR, "pictures")

    @property
    def base_dir(self) -> Path:
        """Get base directory of the project."""
        return Path(__file__).parent.parent

    class Config:
        env_file = ".env"
        extra = "allow"


# Global settings instance
settings = Settings()


# Ensure directories exist
def ensure_directories():
    """Create necessary directories if they don't exist."""
    dirs = [
        settings.signatures_dir,
        settings.pictures_dir,
    ]
    if not settings.is_mysql:
        db_dir = os.path.dirname(settings.DATABASE_PATH)
        if db_dir:
            dirs.append(db_dir)
    for dir_path in dirs:
        os.makedirs(dir_path, exist_ok=True)
