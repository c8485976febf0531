from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True

    # Application
    app_name: str = "Shorten"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Domain used to build short links: {base_url}/{short_id}
    base_url: str = "http://localhost:8080"

    # Short id generation
    short_id_length: int = 10
    short_id_strategy: str = "nanoid"  # Options: "nanoid", "random"
    max_retries: int = 5

    # Seconds to wait for the store lock, -1 waits forever
    lock_timeout: float = -1

    # Logging
    log_level: str = "INFO"

    @field_validator("lock_timeout")
    @classmethod
    def check_lock_timeout(cls, value: float) -> float:
        """threading.Lock accepts -1 (wait forever) or a non-negative timeout"""
        if value != -1 and value < 0:
            raise ValueError("lock_timeout must be -1 or >= 0")
        return value

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
