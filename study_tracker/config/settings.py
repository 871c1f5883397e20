from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    data_file: Path = Field(
        default=Path("study-tracker.json"),
        validation_alias="STUDY_TRACKER_DATA_FILE",
        description="JSON file holding all goals",
    )
    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="STUDY_TRACKER_LOG_FILE",
        description="Optional rotating log file",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to WARNING.")
            return "WARNING"
        return upper_value


settings = Settings()
