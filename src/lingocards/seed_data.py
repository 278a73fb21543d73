"""Demo vocabulary and progress used when no other data is loaded."""
from datetime import date, datetime, timedelta, UTC
from typing import List, Optional

from lingocards.config import settings
from lingocards.models.progress_models import LanguageProgress, UserProgress
from lingocards.models.vocabulary import Difficulty, Language, VocabularyWord

# (id, word, translation, pronunciation, example, example translation,
#  difficulty, category, correct, incorrect, due in days)
SPANISH_WORDS = [
    ("es-1", "Hola", "Hello", "OH-lah", "Hola, ¿cómo estás?", "Hello, how are you?",
     Difficulty.BEGINNER, "greetings", 5, 1, 0),
    ("es-2", "Gracias", "Thank you", "GRAH-see-ahs", "Gracias por tu ayuda.",
     "Thank you for your help.", Difficulty.BEGINNER, "politeness", 8, 0, 7),
    ("es-3", "Casa", "House", "KAH-sah", "Mi casa es muy grande.", "My house is very big.",
     Difficulty.BEGINNER, "home", 3, 2, 0),
    ("es-4", "Comida", "Food", "koh-MEE-dah", "La comida está deliciosa.",
     "The food is delicious.", Difficulty.BEGINNER, "food", 2, 3, 0),
    ("es-5", "Trabajar", "To work", "trah-bah-HAHR", "Necesito trabajar mañana.",
     "I need to work tomorrow.", Difficulty.INTERMEDIATE, "verbs", 1, 1, 0),
    ("es-6", "Hermoso", "Beautiful", "er-MOH-soh", "Qué día tan hermoso.",
     "What a beautiful day.", Difficulty.INTERMEDIATE, "adjectives", 4, 1, -1),
]

FRENCH_WORDS = [
    ("fr-1", "Bonjour", "Hello", "bone-ZHOOR", "Bonjour, comment allez-vous?",
     "Hello, how are you?", Difficulty.BEGINNER, "greetings", 6, 0, 7),
    ("fr-2", "Merci", "Thank you", "mer-SEE", "Merci beaucoup pour votre aide.",
     "Thank you very much for your help.", Difficulty.BEGINNER, "politeness", 7, 1, 7),
    ("fr-3", "Maison", "House", "may-ZOHN", "J'aime ma maison.", "I love my house.",
     Difficulty.BEGINNER, "home", 2, 2, 0),
    ("fr-4", "Nourriture", "Food", "noo-ree-TOOR", "Cette nourriture est excellente.",
     "This food is excellent.", Difficulty.INTERMEDIATE, "food", 1, 3, 0),
    ("fr-5", "Travailler", "To work", "trah-vah-YAY", "Je dois travailler demain.",
     "I have to work tomorrow.", Difficulty.INTERMEDIATE, "verbs", 3, 2, 0),
    ("fr-6", "Magnifique", "Beautiful", "man-nee-FEEK", "Le coucher de soleil est magnifique.",
     "The sunset is beautiful.", Difficulty.INTERMEDIATE, "adjectives", 2, 1, 0),
]


def _build_words(rows, today: datetime) -> List[VocabularyWord]:
    words = []
    for (word_id, word, translation, pronunciation, example, example_translation,
         difficulty, category, correct, incorrect, due_in_days) in rows:
        words.append(
            VocabularyWord(
                id=word_id,
                word=word,
                translation=translation,
                pronunciation=pronunciation,
                example_sentence=example,
                example_translation=example_translation,
                difficulty=difficulty,
                category=category,
                correct_count=correct,
                incorrect_count=incorrect,
                next_review_date=today + timedelta(days=due_in_days),
            )
        )
    return words


def build_languages(today: Optional[datetime] = None) -> List[Language]:
    """Build fresh demo languages with due dates relative to ``today``."""
    if today is None:
        today = datetime.now(UTC)
    return [
        Language(code="es", name="Spanish", flag="🇪🇸", vocabulary=_build_words(SPANISH_WORDS, today)),
        Language(code="fr", name="French", flag="🇫🇷", vocabulary=_build_words(FRENCH_WORDS, today)),
    ]


def build_user_progress(today: Optional[date] = None) -> UserProgress:
    """Build demo learner progress with a streak still running ``today``."""
    if today is None:
        today = date.today()
    return UserProgress(
        current_streak=12,
        longest_streak=23,
        total_lessons_completed=45,
        total_words_learned=89,
        daily_goal=settings.progress.daily_goal,
        words_learned_today=0,
        level=8,
        xp=2340,
        last_lesson_date=today - timedelta(days=1),
        language_progress={
            "es": LanguageProgress(level=5, xp=1200, words_learned=45, lessons_completed=23),
            "fr": LanguageProgress(level=3, xp=800, words_learned=32, lessons_completed=18),
        },
    )
