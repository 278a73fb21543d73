"""Models for learner progress."""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional


@dataclass
class LanguageProgress:
    """Progress within a single language."""
    level: int = 1
    xp: int = 0
    words_learned: int = 0
    lessons_completed: int = 0


@dataclass
class UserProgress:
    """Overall learner progress across languages."""
    current_streak: int = 0
    longest_streak: int = 0
    total_lessons_completed: int = 0
    total_words_learned: int = 0
    daily_goal: int = 10
    words_learned_today: int = 0
    level: int = 1
    xp: int = 0
    last_lesson_date: Optional[date] = None
    language_progress: Dict[str, LanguageProgress] = field(default_factory=dict)
