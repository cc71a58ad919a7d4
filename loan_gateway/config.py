"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Storage: "memory" keeps records in-process, "sql" uses database_url
    storage_backend: str = "memory"
    database_url: str = "sqlite:///./loans.db"

    # External Services
    crime_api_base: str = ""  # Empty uses the built-in address matcher
    crime_api_key: str = ""

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    # Auth
    api_key: str = "your-secret-api-key-here"

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
