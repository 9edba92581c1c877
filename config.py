"""
Configuration settings for the quiz assessment runtime.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Quiz Session
    # ========================================
    quiz_default_title: str = Field(
        default="Quiz",
        description="Title shown when no quiz source is installed",
    )
    quiz_no_subject_key: str = Field(
        default="Sem matéria",
        description="Grouping key for questions without a knowledge matrix entry",
    )

    # ========================================
    # Performance Reports
    # ========================================
    quiz_question_title_template: str = Field(
        default="Questão {number}",
        description="Template for synthesized question titles (1-based number)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Minimum loguru level for runtime messages",
    )

    def get_quiz_runtime_config(self) -> dict[str, str]:
        """Get quiz runtime configuration as a dictionary."""
        return {
            "default_title": self.quiz_default_title,
            "no_subject_key": self.quiz_no_subject_key,
            "question_title_template": self.quiz_question_title_template,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
