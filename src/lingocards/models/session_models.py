"""Models for lesson sessions."""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, List, Optional

from lingocards.models.vocabulary import VocabularyWord


class SessionMode(Enum):
    """Kinds of lesson sessions."""
    LEARN = "learn"  # Practice words that are not yet mastered
    REVIEW = "review"  # Due words, most urgent first
    TEST = "test"  # Due words mixed with refreshers, limited lives


class AnswerOutcome(Enum):
    """Result of a single answer."""
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class WordAttempt:
    """Latest result and attempt count for a word within a session."""
    correct: bool
    attempts: int = 1


@dataclass
class LessonSession:
    """State of a lesson in progress."""
    id: str
    language_code: str
    mode: SessionMode
    words: List[VocabularyWord]
    start_time: datetime
    current_index: int = 0
    correct_count: int = 0
    incorrect_count: int = 0
    lives: Optional[int] = None  # None means unlimited
    end_time: Optional[datetime] = None
    is_completed: bool = False
    perfect_words: List[str] = field(default_factory=list)
    reviewed_words: Dict[str, WordAttempt] = field(default_factory=dict)

    @property
    def remaining_words(self) -> int:
        return max(0, len(self.words) - self.current_index)


@dataclass
class SessionSummary:
    """Results shown once a session is finished."""
    total_words: int
    correct_answers: int
    incorrect_answers: int
    accuracy: int  # percent
    time_spent: timedelta
    xp_earned: int
    new_words_learned: int
    perfect_words: List[str] = field(default_factory=list)
