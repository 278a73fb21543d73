"""Configuration settings for LingoCards."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Define base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Spaced repetition settings
MAX_BASE_INTERVAL_DAYS = 7  # interval for a word that was never missed
MIN_INTERVAL_DAYS = 1
JITTER_RATIO = 0.1  # +-10% noise on the interval


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = os.getenv("LOG_DIR", None)
    rotation: str = os.getenv("LOG_ROTATION", "midnight")
    interval: int = int(os.getenv("LOG_INTERVAL", "1"))
    backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))


@dataclass
class LearningSettings:
    """Learning process settings."""
    max_base_interval_days: int = MAX_BASE_INTERVAL_DAYS
    min_interval_days: int = MIN_INTERVAL_DAYS
    jitter_ratio: float = JITTER_RATIO
    review_session_size: int = int(os.getenv("REVIEW_SESSION_SIZE", "10"))
    test_session_size: int = int(os.getenv("TEST_SESSION_SIZE", "10"))
    test_refresher_words: int = int(os.getenv("TEST_REFRESHER_WORDS", "5"))
    test_lives: int = int(os.getenv("TEST_LIVES", "5"))
    learn_session_size: int = int(os.getenv("LEARN_SESSION_SIZE", "10"))
    learn_mastery_threshold: int = int(os.getenv("LEARN_MASTERY_THRESHOLD", "5"))
    fallback_session_size: int = int(os.getenv("FALLBACK_SESSION_SIZE", "5"))


@dataclass
class ProgressSettings:
    """XP and level settings."""
    xp_per_correct: int = int(os.getenv("XP_PER_CORRECT", "10"))
    xp_per_perfect: int = int(os.getenv("XP_PER_PERFECT", "5"))
    xp_per_level: int = int(os.getenv("XP_PER_LEVEL", "1000"))
    language_xp_per_level: int = int(os.getenv("LANGUAGE_XP_PER_LEVEL", "200"))
    daily_goal: int = int(os.getenv("DAILY_GOAL", "10"))
    max_new_words_per_session: int = int(os.getenv("MAX_NEW_WORDS_PER_SESSION", "5"))


@dataclass
class MonitoringSettings:
    """Prometheus metrics settings."""
    enabled: bool = os.getenv("METRICS_ENABLED", "false").lower() == "true"
    port: int = int(os.getenv("METRICS_PORT", "9090"))


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_learning_settings() -> LearningSettings:
    """Get learning settings."""
    return LearningSettings()


def get_progress_settings() -> ProgressSettings:
    """Get progress settings."""
    return ProgressSettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    learning: LearningSettings = field(default_factory=get_learning_settings)
    progress: ProgressSettings = field(default_factory=get_progress_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        learning = self.learning
        if learning.min_interval_days < 1:
            raise ValueError("MIN_INTERVAL_DAYS must be at least 1")

        if learning.max_base_interval_days < learning.min_interval_days:
            raise ValueError("MAX_BASE_INTERVAL_DAYS cannot be less than MIN_INTERVAL_DAYS")

        if learning.jitter_ratio < 0 or learning.jitter_ratio >= 1:
            raise ValueError("JITTER_RATIO must be in [0, 1)")

        for name in (
            "review_session_size",
            "test_session_size",
            "learn_session_size",
            "fallback_session_size",
            "test_lives",
        ):
            if getattr(learning, name) < 1:
                raise ValueError(f"{name.upper()} must be positive")

        if learning.test_refresher_words < 0:
            raise ValueError("TEST_REFRESHER_WORDS cannot be negative")

        if self.progress.xp_per_level < 1 or self.progress.language_xp_per_level < 1:
            raise ValueError("XP_PER_LEVEL and LANGUAGE_XP_PER_LEVEL must be positive")


# Create global settings instance
settings = Settings()
settings.validate()
