"""Vocabulary word and language models."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class Difficulty(Enum):
    """Difficulty level of a vocabulary word."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class VocabularyWord:
    """A single flashcard and its answer history.

    Words are immutable values: recording an answer produces a new word with
    one counter incremented and a recomputed ``next_review_date``.
    """
    id: str
    word: str
    translation: str
    next_review_date: datetime
    correct_count: int = 0
    incorrect_count: int = 0
    last_reviewed: Optional[datetime] = None
    pronunciation: str = ""
    example_sentence: str = ""
    example_translation: str = ""
    difficulty: Difficulty = Difficulty.BEGINNER
    category: str = ""
    audio_url: Optional[str] = None

    def __post_init__(self) -> None:
        if self.correct_count < 0 or self.incorrect_count < 0:
            raise ValueError(
                f"Answer counts of word {self.id} must be non-negative, "
                f"got correct={self.correct_count} incorrect={self.incorrect_count}"
            )

    @property
    def total_answers(self) -> int:
        return self.correct_count + self.incorrect_count

    @property
    def urgency(self) -> float:
        """Laplace-smoothed ratio of incorrect to correct answers."""
        return (self.incorrect_count + 1) / (self.correct_count + 1)

    def is_due(self, now: datetime) -> bool:
        """Check whether the word should be reviewed at ``now``."""
        return self.next_review_date <= now


@dataclass
class Language:
    """A target language and the learner's vocabulary for it."""
    code: str
    name: str
    flag: str = ""
    vocabulary: List[VocabularyWord] = field(default_factory=list)
