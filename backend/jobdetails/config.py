"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
DEFAULT_DB_URL = f"sqlite:///{BASE / 'app.db'}"


class Settings:
    ENV: str
    DATABASE_URL: str
    APP_NAME: str
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool
    ALLOW_SQLITE: bool
    DEFAULT_PAGE_SIZE: int
    MAX_PAGE_SIZE: int
    HTTP_TIMEOUT_SECONDS: float
    HOST: str
    PORT: int

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DB_URL)
        # prefix for the X-<app>-alert / X-<app>-error response headers
        self.APP_NAME = os.getenv("APP_NAME", "studentjobsApp")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.ALLOW_SQLITE = os.getenv("ALLOW_SQLITE", "false").lower() == "true"
        self.DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
        self.MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "2000"))
        self.HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
        self.HOST = os.getenv("HOST", "127.0.0.1")
        self.PORT = int(os.getenv("PORT", "8080"))
        self._validate()

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def _validate(self):
        if self.DEFAULT_PAGE_SIZE < 1 or self.MAX_PAGE_SIZE < 1:
            raise RuntimeError("DEFAULT_PAGE_SIZE and MAX_PAGE_SIZE must be positive")
        if self.DEFAULT_PAGE_SIZE > self.MAX_PAGE_SIZE:
            raise RuntimeError("DEFAULT_PAGE_SIZE must not exceed MAX_PAGE_SIZE")
        if self.ENV != "dev" and self.DATABASE_URL == DEFAULT_DB_URL and not self.ALLOW_SQLITE:
            raise RuntimeError("DATABASE_URL must be set explicitly in non-dev environments")


settings = Settings()
