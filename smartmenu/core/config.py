from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "SmartMenu"
    environment: str = "local"
    log_level: str = "INFO"

    menu_api_url: str = "http://localhost:8787/menus"
    menu_api_timeout: float = 10.0

    # A single attempt per fetch unless raised explicitly
    retry_max_attempts: int = 1
    retry_backoff_initial: float = 0.5
    retry_backoff_max: float = 8.0

    sentry_dsn: str | None = None
    sentry_environment: str | None = None


settings = Settings()
