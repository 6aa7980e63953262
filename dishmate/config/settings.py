from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="DISHMATE_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="DISHMATE_LOG_FILE",
        description="Optional log file path; console-only logging when unset",
    )
    log_rotation: str = Field(
        default="10 MB",
        validation_alias="DISHMATE_LOG_ROTATION",
        description="Log file rotation trigger (size or interval)",
    )
    log_retention: str = Field(
        default="7 days",
        validation_alias="DISHMATE_LOG_RETENTION",
        description="How long rotated log files are kept",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DISHMATE_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid DISHMATE_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("log_file")
    @classmethod
    def blank_log_file_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


settings = Settings()
