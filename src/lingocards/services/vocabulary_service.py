"""Service for managing in-memory vocabulary collections."""
import logging
import random
from dataclasses import replace
from datetime import datetime, UTC
from typing import Dict, Iterable, List, Optional

from lingocards import monitoring
from lingocards.exceptions import LanguageNotFoundError, WordNotFoundError
from lingocards.models.session_models import AnswerOutcome
from lingocards.models.vocabulary import Language, VocabularyWord
from lingocards.services.review_scheduler import compute_next_review_date
from lingocards.services.review_selector import get_due_words, select_words_for_review

logger = logging.getLogger(__name__)


class VocabularyService:
    """Owns the word collections of every loaded language."""

    def __init__(self, languages: Iterable[Language], rng: Optional[random.Random] = None):
        """Initialize the service with the languages to manage."""
        self.languages: Dict[str, Language] = {language.code: language for language in languages}
        self.rng = rng

    def list_languages(self) -> List[Language]:
        """Get all loaded languages."""
        return list(self.languages.values())

    def get_language(self, language_code: str) -> Language:
        """Get a language by its code."""
        language = self.languages.get(language_code)
        if language is None:
            raise LanguageNotFoundError(language_code)
        return language

    def get_word(self, language_code: str, word_id: str) -> VocabularyWord:
        """Get a word by its id."""
        for word in self.get_language(language_code).vocabulary:
            if word.id == word_id:
                return word
        raise WordNotFoundError(language_code, word_id)

    def get_due_words(
        self, language_code: str, now: Optional[datetime] = None
    ) -> List[VocabularyWord]:
        """Get the words of a language that are due for review."""
        return get_due_words(self.get_language(language_code).vocabulary, now)

    def count_due_words(self, language_code: str, now: Optional[datetime] = None) -> int:
        """Get the number of due words of a language."""
        count = len(self.get_due_words(language_code, now))
        monitoring.due_words.labels(language=language_code).set(count)
        return count

    def get_words_for_review(
        self,
        language_code: str,
        max_words: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[VocabularyWord]:
        """Get the most urgent due words of a language."""
        return select_words_for_review(self.get_language(language_code).vocabulary, max_words, now)

    def record_answer(
        self,
        language_code: str,
        word_id: str,
        outcome: AnswerOutcome,
        now: Optional[datetime] = None,
        rng: Optional[random.Random] = None,
    ) -> VocabularyWord:
        """Record an answer for a word and reschedule its next review.

        Exactly one counter is incremented, then the review date is
        recomputed from the new counts. The stored word is replaced with the
        updated value, which is also returned.
        """
        if now is None:
            now = datetime.now(UTC)

        language = self.get_language(language_code)
        for index, word in enumerate(language.vocabulary):
            if word.id == word_id:
                break
        else:
            raise WordNotFoundError(language_code, word_id)

        if outcome == AnswerOutcome.CORRECT:
            correct_count, incorrect_count = word.correct_count + 1, word.incorrect_count
        else:
            correct_count, incorrect_count = word.correct_count, word.incorrect_count + 1

        next_review_date = compute_next_review_date(
            correct_count, incorrect_count, now, rng or self.rng
        )
        updated = replace(
            word,
            correct_count=correct_count,
            incorrect_count=incorrect_count,
            last_reviewed=now,
            next_review_date=next_review_date,
        )
        language.vocabulary[index] = updated

        monitoring.answers_recorded.labels(language=language_code, outcome=outcome.value).inc()
        monitoring.review_interval_days.observe((next_review_date - now).days)
        logger.info(
            f"Recorded {outcome.value} answer for {word_id} ({language_code}), "
            f"next review {next_review_date.isoformat()}"
        )
        return updated
