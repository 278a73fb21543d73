"""Exceptions raised by LingoCards services."""


class LingoCardsError(Exception):
    """Base class for all LingoCards errors."""


class LanguageNotFoundError(LingoCardsError):
    """Raised when a language code is not loaded."""

    def __init__(self, language_code: str):
        super().__init__(f"Language {language_code} not found")
        self.language_code = language_code


class WordNotFoundError(LingoCardsError):
    """Raised when a word id is not part of a language's vocabulary."""

    def __init__(self, language_code: str, word_id: str):
        super().__init__(f"Word {word_id} not found in language {language_code}")
        self.language_code = language_code
        self.word_id = word_id


class SessionCompletedError(LingoCardsError):
    """Raised when an answer or navigation is attempted on a finished session."""

    def __init__(self, session_id: str):
        super().__init__(f"Session {session_id} is already completed")
        self.session_id = session_id
