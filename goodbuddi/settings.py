from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Local SQLite file unless a real database is configured.
    DATABASE_URL: str = Field(default="sqlite:///./goodbuddi.db")

    CORS_ORIGIN: str = "*"
    LOG_LEVEL: str = "info"

    # Sidecar processes and tests run without the timer ticker.
    DISABLE_SCHEDULER: bool = False
    TIMER_TICK_SECONDS: int = Field(default=1, ge=1)

    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in (self.CORS_ORIGIN or "").split(",") if o.strip()]
        return origins or ["*"]

settings = Settings()
