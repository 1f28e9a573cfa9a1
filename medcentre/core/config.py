from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from the project root so it loads regardless of cwd
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env"),
        env_file_encoding="utf-8",
        env_prefix="MEDCENTRE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Env
    env: str = "development"
    log_level: str | None = None  # e.g. "WARNING"; overrides the env-based default

    # Schedule/booking business rules
    default_slot_duration_minutes: int = 30
    # Reject a second booking of the same doctor/date/slot
    exclusive_slots: bool = False

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


settings = Settings()
