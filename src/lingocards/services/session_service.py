"""Service for running lesson sessions."""
import logging
import math
import random
import uuid
from datetime import datetime, UTC
from typing import Optional

from lingocards import monitoring
from lingocards.config import ProgressSettings, settings
from lingocards.exceptions import SessionCompletedError
from lingocards.models.session_models import (
    AnswerOutcome,
    LessonSession,
    SessionMode,
    SessionSummary,
    WordAttempt,
)
from lingocards.models.vocabulary import VocabularyWord
from lingocards.services.session_builder import SessionBuilder
from lingocards.services.vocabulary_service import VocabularyService

logger = logging.getLogger(__name__)


class SessionService:
    """Service for starting, answering and completing lesson sessions."""

    def __init__(
        self,
        vocabulary_service: VocabularyService,
        builder: Optional[SessionBuilder] = None,
        rng: Optional[random.Random] = None,
        progress_settings: Optional[ProgressSettings] = None,
    ):
        """Initialize the service with the vocabulary it reviews."""
        self.vocabulary_service = vocabulary_service
        self.rng = rng
        self.builder = builder or SessionBuilder(rng=rng)
        self.progress_settings = progress_settings or settings.progress

    def start_session(
        self,
        language_code: str,
        mode: SessionMode,
        now: Optional[datetime] = None,
    ) -> LessonSession:
        """Create a new session and choose its words."""
        if now is None:
            now = datetime.now(UTC)

        language = self.vocabulary_service.get_language(language_code)
        words = self.builder.build(language.vocabulary, mode, now)
        lives = self.builder.settings.test_lives if mode == SessionMode.TEST else None

        session = LessonSession(
            id=uuid.uuid4().hex,
            language_code=language_code,
            mode=mode,
            words=words,
            start_time=now,
            lives=lives,
        )
        monitoring.sessions_started.labels(mode=mode.value).inc()
        monitoring.session_size.labels(mode=mode.value).observe(len(words))
        logger.info(
            f"Started {mode.value} session {session.id} for {language_code} with {len(words)} words"
        )
        return session

    def current_word(self, session: LessonSession) -> Optional[VocabularyWord]:
        """Get the word currently shown, or None when the session is over."""
        if session.is_completed or session.current_index >= len(session.words):
            return None
        return session.words[session.current_index]

    def answer(
        self,
        session: LessonSession,
        outcome: AnswerOutcome,
        now: Optional[datetime] = None,
    ) -> VocabularyWord:
        """Record an answer for the current word and move on.

        The word is rescheduled through the vocabulary service. In test mode
        an incorrect answer costs a life and the session ends when none are
        left.
        """
        self._ensure_active(session)
        if now is None:
            now = datetime.now(UTC)

        word = self.current_word(session)
        if word is None:
            self.complete(session, now)
            raise SessionCompletedError(session.id)

        previous = session.reviewed_words.get(word.id)
        attempts = (previous.attempts if previous else 0) + 1
        correct = outcome == AnswerOutcome.CORRECT
        session.reviewed_words[word.id] = WordAttempt(correct=correct, attempts=attempts)

        if correct:
            session.correct_count += 1
            # Only a correct answer on the first try counts as perfect
            if previous is None:
                session.perfect_words.append(word.id)
        else:
            session.incorrect_count += 1

        updated = self.vocabulary_service.record_answer(
            session.language_code, word.id, outcome, now, self.rng
        )
        session.words[session.current_index] = updated

        if not correct and session.lives is not None:
            session.lives = max(0, session.lives - 1)
            if session.lives == 0:
                logger.info(f"Session {session.id} ran out of lives")
                self.complete(session, now)
                return updated

        self._advance(session, now)
        return updated

    def skip(self, session: LessonSession, now: Optional[datetime] = None) -> None:
        """Move to the next word without recording an answer."""
        self._ensure_active(session)
        self._advance(session, now or datetime.now(UTC))

    def previous(self, session: LessonSession) -> None:
        """Go back to the previous word."""
        self._ensure_active(session)
        if session.current_index > 0:
            session.current_index -= 1

    def complete(self, session: LessonSession, now: Optional[datetime] = None) -> SessionSummary:
        """Finish a session and summarize its results."""
        if not session.is_completed:
            session.is_completed = True
            session.end_time = now or datetime.now(UTC)
            duration = (session.end_time - session.start_time).total_seconds()
            monitoring.sessions_completed.labels(mode=session.mode.value).inc()
            monitoring.session_duration.labels(mode=session.mode.value).observe(duration)
            logger.info(
                f"Completed session {session.id}: {session.correct_count} correct, "
                f"{session.incorrect_count} incorrect"
            )
        return self.summarize(session)

    def summarize(self, session: LessonSession) -> SessionSummary:
        """Summarize a session's results so far."""
        end_time = session.end_time or datetime.now(UTC)
        return SessionSummary(
            total_words=len(session.words),
            correct_answers=session.correct_count,
            incorrect_answers=session.incorrect_count,
            accuracy=self.accuracy(session),
            time_spent=end_time - session.start_time,
            xp_earned=(
                session.correct_count * self.progress_settings.xp_per_correct
                + len(session.perfect_words) * self.progress_settings.xp_per_perfect
            ),
            new_words_learned=min(self.progress_settings.max_new_words_per_session, session.correct_count),
            perfect_words=list(session.perfect_words),
        )

    @staticmethod
    def accuracy(session: LessonSession) -> int:
        """Percentage of correct answers, 0 when nothing was answered."""
        answered = session.correct_count + session.incorrect_count
        if answered == 0:
            return 0
        # Half up, so 12.5% shows as 13%
        return math.floor(session.correct_count / answered * 100 + 0.5)

    def _advance(self, session: LessonSession, now: datetime) -> None:
        if session.current_index >= len(session.words) - 1:
            self.complete(session, now)
        else:
            session.current_index += 1

    @staticmethod
    def _ensure_active(session: LessonSession) -> None:
        if session.is_completed:
            raise SessionCompletedError(session.id)
