from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STORY_ID = "voyage_aeon_v1"
DEFAULT_MAX_PROGRESS = 15


class Settings(BaseSettings):
    app_name: str = "voyage_aeon"
    env: str = "dev"
    log_level: str = "INFO"

    story_id: str = DEFAULT_STORY_ID
    story_start_scene: str = "start"
    max_progress: int = DEFAULT_MAX_PROGRESS

    session_registry_max: int = Field(default=256, ge=1)
    scene_stream_paragraph_delay_s: float = Field(default=0.0, ge=0.0)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("max_progress")
    @classmethod
    def validate_max_progress(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_progress must be at least 1")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return (value or "INFO").strip().upper() or "INFO"


settings = Settings()
