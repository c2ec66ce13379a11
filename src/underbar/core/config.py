import os
from typing import Optional
from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

ENV_PREFIX = "UNDERBAR_"


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    RANDOM_SEED: Optional[int] = Field(
        None,
        description="Seed for the default shuffle generator. None draws fresh OS entropy.",
        ge=0,
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``UNDERBAR_*`` environment variables.

        Unset variables fall back to the field defaults.
        """
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + name)
            if raw is not None and raw != "":
                values[name] = raw

        return cls(**values)


settings = Settings.load()
