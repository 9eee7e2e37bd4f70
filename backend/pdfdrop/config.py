"""Application configuration from environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All config comes from env vars or .env file."""

    HOST: str = "0.0.0.0"
    API_PORT: int = 3000
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # Paths are relative to the process working directory
    UPLOADS_DIR: str = "uploads"
    PUBLIC_DIR: str = "public"
    THUMBNAILS_DIR: str = "public/thumbnails"
    METADATA_FILE: str = "files.json"

    ALLOWED_MIME_TYPE: str = "application/pdf"
    # Raw exception messages leak into upload failure responses when True
    EXPOSE_ERROR_DETAILS: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
