from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./fittrack.db"
    DB_ECHO: bool = False
    # На устройстве пользователя БД пересоздавать нельзя, только для разработки
    RESET_DATABASE: bool = False
    LOG_LEVEL: str = "INFO"

    DEFAULT_RPE: float = 8.0
    DEFAULT_REST_SECONDS: int = 90
    OVERLOAD_RPE_THRESHOLD: float = 7.5
    OVERLOAD_INCREMENT_KG: float = 2.5
    TICK_INTERVAL_SECONDS: float = 1.0
    STREAK_LOOKBACK_DAYS: int = 365
    RECENT_FOODS_LIMIT: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )


settings = Settings()
