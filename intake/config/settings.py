from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    language: str = "es"

    webhook_url: str = "http://localhost:5678/webhook/invoice-processing"
    webhook_timeout_ms: int = 30000
    webhook_max_retries: int = 2
    webhook_auth_token: str = ""

    storage_endpoint: str = "http://localhost:54321/storage/v1/object/invoices"
    storage_api_key: str = ""
    signed_url_expires_in: int = 3600

    max_file_size_bytes: int = 5 * 1024 * 1024
    inter_file_pause_seconds: float = 0.5
    rate_limit_per_minute: int = 5

    composer_engine: str = "reportlab"
