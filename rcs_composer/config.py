from pydantic_settings import BaseSettings

from .domain.value_objects import MAX_UPLOAD_BYTES


class Settings(BaseSettings):
    """Composer settings loaded from environment."""

    # Service
    service_name: str = "rcs-composer"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Uploads
    max_upload_bytes: int = MAX_UPLOAD_BYTES

    class Config:
        env_file = ".env"
        env_prefix = "RCS_"
        case_sensitive = False


settings = Settings()
