from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    admin_token: str = Field(alias="ADMIN_TOKEN")

    db_path: str = Field(default="/data/help_articles.db", alias="DB_PATH")

    api_base_url: str = Field(default="http://127.0.0.1:8000/mock", alias="API_BASE_URL")
    request_timeout_seconds: float = Field(default=15, alias="REQUEST_TIMEOUT_SECONDS")
    user_agent: str = Field(default="HelpArticles/1.0", alias="USER_AGENT")

    refresh_interval_hours: int = Field(default=24, alias="REFRESH_INTERVAL_HOURS")
    retry_backoff_minutes: int = Field(default=15, alias="RETRY_BACKOFF_MINUTES")
    retry_backoff_max_minutes: int = Field(default=5 * 60, alias="RETRY_BACKOFF_MAX_MINUTES")

    mock_backend_enabled: bool = Field(default=True, alias="MOCK_BACKEND_ENABLED")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

settings = Settings()
