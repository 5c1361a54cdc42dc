# config.py
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # --- Metadata ---
    APP_NAME: str = "Kendall Posture Check"
    APP_VERSION: str = "0.1.0"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    JSON_LOGS: bool = False

    # --- Scoring ---
    POSTURE_SIDE: Literal["left", "right"] = "left"
    # Unset keeps low-confidence landmarks in the scoring.
    POSTURE_MIN_VISIBILITY: Optional[float] = Field(None, ge=0.0, le=1.0)

    # --- Detection / rendering ---
    POSTURE_MODEL_PATH: Optional[str] = None
    POSTURE_DRAW_VISIBILITY: float = Field(0.5, ge=0.0, le=1.0)


def get_settings() -> AppSettings:
    return AppSettings()
