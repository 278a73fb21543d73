"""Main application class."""
import logging
import random
from datetime import datetime, UTC
from typing import Callable, List, Optional, Tuple

from lingocards.config import settings
from lingocards.models.progress_models import UserProgress
from lingocards.models.session_models import AnswerOutcome, LessonSession, SessionMode, SessionSummary
from lingocards.models.vocabulary import Language, VocabularyWord
from lingocards.monitoring import error_count, start_monitoring
from lingocards.seed_data import build_languages, build_user_progress
from lingocards.services.progress_service import ProgressService
from lingocards.services.session_service import SessionService
from lingocards.services.vocabulary_service import VocabularyService

COMMANDS = {
    "y": "correct",
    "n": "incorrect",
    "s": "skip",
    "p": "previous",
    "q": "quit",
}


class LingoCards:
    """Wires the services together and runs lessons in a terminal."""

    def __init__(
        self,
        languages: Optional[List[Language]] = None,
        progress: Optional[UserProgress] = None,
        rng: Optional[random.Random] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        """Initialize the application with demo data unless data is given."""
        self.logger = logging.getLogger(__name__)
        self.vocabulary_service = VocabularyService(
            languages if languages is not None else build_languages(), rng
        )
        self.session_service = SessionService(self.vocabulary_service, rng=rng)
        self.progress_service = ProgressService(progress or build_user_progress())
        self.input = input_func
        self.output = output_func
        self.monitoring_started = False

    def start_monitoring(self) -> None:
        """Expose Prometheus metrics if enabled in settings."""
        if not settings.monitoring.enabled or self.monitoring_started:
            return
        start_monitoring(settings.monitoring.port)
        self.monitoring_started = True
        self.logger.info(f"Metrics server listening on port {settings.monitoring.port}")

    def dashboard(self, now: Optional[datetime] = None) -> List[Tuple[Language, int]]:
        """Get every language with its number of due words."""
        return [
            (language, self.vocabulary_service.count_due_words(language.code, now))
            for language in self.vocabulary_service.list_languages()
        ]

    def show_dashboard(self, now: Optional[datetime] = None) -> None:
        """Print due counts per language and overall progress."""
        progress = self.progress_service.progress
        into_level, to_next = self.progress_service.level_progress()
        self.output(
            f"Level {progress.level} ({into_level} XP, {to_next} XP to level {progress.level + 1}), "
            f"streak {progress.current_streak} days"
        )
        for language, due in self.dashboard(now):
            self.output(
                f"{language.flag} {language.name} [{language.code}]: "
                f"{due} of {len(language.vocabulary)} words due"
            )

    def show_due_words(self, language_code: str, now: Optional[datetime] = None) -> None:
        """Print the words of a language that are due, most urgent first."""
        words = self.vocabulary_service.get_words_for_review(language_code, None, now)
        if not words:
            self.output("Nothing to review, come back later.")
        for word in words:
            self.output(self._format_word(word, show_translation=True))

    def run_session(self, language_code: str, mode: SessionMode) -> SessionSummary:
        """Run an interactive lesson and apply its results to the progress."""
        session = self.session_service.start_session(language_code, mode)
        self.output(f"{mode.value.capitalize()} session: {len(session.words)} words")
        self.output("Answer with y (knew it), n (missed it), s (skip), p (previous), q (quit)")

        while not session.is_completed and session.words:
            word = self.session_service.current_word(session)
            self.output(self._format_progress(session))
            self.output(self._format_word(word, show_translation=False))
            command = self.input("> ").strip().lower()
            try:
                if not self._handle_command(session, command):
                    break
            except ValueError as e:
                error_count.labels(error_type="invalid_command").inc()
                self.output(str(e))

        summary = self.session_service.complete(session, datetime.now(UTC))
        if summary.correct_answers + summary.incorrect_answers:
            self.progress_service.apply_summary(language_code, summary)
        self.output(
            f"Done: {summary.correct_answers}/{summary.correct_answers + summary.incorrect_answers} "
            f"correct ({summary.accuracy}%), +{summary.xp_earned} XP"
        )
        return summary

    def _handle_command(self, session: LessonSession, command: str) -> bool:
        """Apply a terminal command. Returns False when the user quits."""
        action = COMMANDS.get(command)
        if action is None:
            raise ValueError(f"Unknown command {command!r}, use one of: {', '.join(COMMANDS)}")

        if action == "quit":
            return False
        if action == "skip":
            self.session_service.skip(session)
        elif action == "previous":
            self.session_service.previous(session)
        else:
            word = self.session_service.current_word(session)
            outcome = AnswerOutcome.CORRECT if action == "correct" else AnswerOutcome.INCORRECT
            self.session_service.answer(session, outcome)
            if outcome == AnswerOutcome.INCORRECT:
                self.output(f"  {word.word} = {word.translation}")
        return True

    @staticmethod
    def _format_progress(session: LessonSession) -> str:
        text = f"[{session.current_index + 1}/{len(session.words)}]"
        if session.lives is not None:
            text += f" lives: {session.lives}"
        return text

    @staticmethod
    def _format_word(word: VocabularyWord, show_translation: bool) -> str:
        text = f"{word.word} ({word.pronunciation})" if word.pronunciation else word.word
        if show_translation:
            text += f" = {word.translation}"
        elif word.example_sentence:
            text += f"\n  {word.example_sentence}"
        return text
