"""LingoCards: vocabulary flashcards with spaced-repetition review."""

__version__ = "0.1.0"
