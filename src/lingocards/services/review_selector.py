"""Selection of due words for review sessions."""
import logging
from datetime import datetime, UTC
from typing import Iterable, List, Optional

from lingocards.config import settings
from lingocards.models.vocabulary import VocabularyWord

logger = logging.getLogger(__name__)


def urgency(word: VocabularyWord) -> float:
    """Smoothed error ratio used to rank due words; higher is more urgent."""
    return (word.incorrect_count + 1) / (word.correct_count + 1)


def get_due_words(
    vocabulary: Iterable[VocabularyWord], now: Optional[datetime] = None
) -> List[VocabularyWord]:
    """Get the words whose review date is at or before ``now``.

    Input order is preserved and the input is never modified.
    """
    if now is None:
        now = datetime.now(UTC)
    return [word for word in vocabulary if word.next_review_date <= now]


def count_due_words(
    vocabulary: Iterable[VocabularyWord], now: Optional[datetime] = None
) -> int:
    """Get the number of words due at ``now``."""
    return len(get_due_words(vocabulary, now))


def select_words_for_review(
    vocabulary: Iterable[VocabularyWord],
    max_words: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[VocabularyWord]:
    """Choose the most urgent due words for a review session.

    Due words are ranked by descending urgency. Words with equal urgency keep
    their relative input order. At most ``max_words`` words are returned.
    """
    if max_words is None:
        max_words = settings.learning.review_session_size

    due_words = get_due_words(vocabulary, now)
    # sorted() is stable, so ties keep their input order
    ranked = sorted(due_words, key=urgency, reverse=True)
    logger.debug(f"Due words: {len(due_words)}, selecting up to {max_words}")
    return ranked[:max_words]
