"""Choosing the words for a lesson session."""
import logging
import random
from datetime import datetime, UTC
from typing import List, Optional, Sequence

from lingocards.config import LearningSettings, settings
from lingocards.models.session_models import SessionMode
from lingocards.models.vocabulary import VocabularyWord
from lingocards.services.review_selector import select_words_for_review

logger = logging.getLogger(__name__)


class SessionBuilder:
    """Builds the word list for each session mode."""

    def __init__(
        self,
        learning_settings: Optional[LearningSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the builder with learning settings and a random source."""
        self.settings = learning_settings or settings.learning
        self.rng = rng or random.Random()

    def review_words(
        self, vocabulary: Sequence[VocabularyWord], now: datetime
    ) -> List[VocabularyWord]:
        """Most urgent due words."""
        return select_words_for_review(vocabulary, self.settings.review_session_size, now)

    def test_words(
        self, vocabulary: Sequence[VocabularyWord], now: datetime
    ) -> List[VocabularyWord]:
        """Due words mixed with randomly chosen refreshers, in random order.

        Every due word is included up to the session size. Refreshers are
        drawn from the words that are not yet due and fill the remaining
        places, at most ``test_refresher_words`` of them.
        """
        session_size = self.settings.test_session_size
        due_words = select_words_for_review(vocabulary, session_size, now)
        due_ids = {word.id for word in due_words}

        candidates = []
        seen_ids = set(due_ids)
        for word in vocabulary:
            if word.id in seen_ids:
                continue
            seen_ids.add(word.id)
            candidates.append(word)

        refresher_count = min(
            self.settings.test_refresher_words,
            session_size - len(due_words),
            len(candidates),
        )
        refreshers = self.rng.sample(candidates, refresher_count)
        logger.info(f"Test session: {len(due_words)} due words, {len(refreshers)} refreshers")

        words = due_words + refreshers
        self.rng.shuffle(words)
        return words

    def learn_words(self, vocabulary: Sequence[VocabularyWord]) -> List[VocabularyWord]:
        """Words that still need practice, weakest first."""
        threshold = self.settings.learn_mastery_threshold
        candidates = [word for word in vocabulary if word.correct_count < threshold]
        candidates.sort(key=lambda word: word.correct_count - word.incorrect_count)
        return candidates[: self.settings.learn_session_size]

    def build(
        self,
        vocabulary: Sequence[VocabularyWord],
        mode: SessionMode,
        now: Optional[datetime] = None,
    ) -> List[VocabularyWord]:
        """Choose the words for a session of the given mode.

        Falls back to the first few words of the vocabulary when the mode
        selects nothing.
        """
        if now is None:
            now = datetime.now(UTC)

        if mode == SessionMode.REVIEW:
            words = self.review_words(vocabulary, now)
        elif mode == SessionMode.TEST:
            words = self.test_words(vocabulary, now)
        else:
            words = self.learn_words(vocabulary)

        if not words:
            logger.info(f"No words selected for {mode.value} session, using first words")
            words = list(vocabulary[: self.settings.fallback_session_size])
        return words
