"""Service for tracking learner progress."""
import logging
from datetime import date, timedelta
from typing import Optional, Tuple

from lingocards.config import ProgressSettings, settings
from lingocards.models.progress_models import LanguageProgress, UserProgress
from lingocards.models.session_models import SessionSummary

logger = logging.getLogger(__name__)


class ProgressService:
    """Applies finished sessions to the learner's progress."""

    def __init__(self, progress: UserProgress, progress_settings: Optional[ProgressSettings] = None):
        """Initialize the service with the progress record it updates."""
        self.progress = progress
        self.settings = progress_settings or settings.progress

    def get_language_progress(self, language_code: str) -> LanguageProgress:
        """Get progress for a language, creating an empty record if needed."""
        return self.progress.language_progress.setdefault(language_code, LanguageProgress())

    def apply_summary(
        self, language_code: str, summary: SessionSummary, today: Optional[date] = None
    ) -> UserProgress:
        """Add a finished session's XP, words and lesson to the progress."""
        if today is None:
            today = date.today()
        progress = self.progress

        self._update_streak(today)

        levels_gained = self._levels_crossed(progress.xp, summary.xp_earned, self.settings.xp_per_level)
        progress.xp += summary.xp_earned
        progress.level += levels_gained
        progress.total_lessons_completed += 1
        progress.total_words_learned += summary.new_words_learned
        progress.words_learned_today += summary.new_words_learned

        language = self.get_language_progress(language_code)
        language.level += self._levels_crossed(
            language.xp, summary.xp_earned, self.settings.language_xp_per_level
        )
        language.xp += summary.xp_earned
        language.words_learned += summary.new_words_learned
        language.lessons_completed += 1

        if levels_gained:
            logger.info(f"Level up: now level {progress.level}")
        logger.info(
            f"Applied session for {language_code}: +{summary.xp_earned} XP, "
            f"streak {progress.current_streak}"
        )
        return progress

    def level_progress(self) -> Tuple[int, int]:
        """Get XP earned within the current level and XP left until the next."""
        into_level = self.progress.xp % self.settings.xp_per_level
        return into_level, self.settings.xp_per_level - into_level

    def daily_goal_progress(self) -> int:
        """Get today's progress towards the daily goal as a percentage."""
        if self.progress.daily_goal <= 0:
            return 100
        percent = self.progress.words_learned_today * 100 // self.progress.daily_goal
        return min(100, percent)

    def _update_streak(self, today: date) -> None:
        progress = self.progress
        last = progress.last_lesson_date
        if last == today:
            return

        if last is not None and last == today - timedelta(days=1):
            progress.current_streak += 1
        else:
            progress.current_streak = 1
        progress.words_learned_today = 0
        progress.last_lesson_date = today
        progress.longest_streak = max(progress.longest_streak, progress.current_streak)

    @staticmethod
    def _levels_crossed(xp: int, gained: int, xp_per_level: int) -> int:
        return (xp + gained) // xp_per_level - xp // xp_per_level
