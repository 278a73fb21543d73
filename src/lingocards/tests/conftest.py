"""Test configuration."""
import os
import random
from datetime import datetime, UTC
from pathlib import Path
from typing import Callable

import pytest
from dotenv import load_dotenv
from faker import Faker

# Set test environment before any imports
os.environ["ENV"] = "test"

# Load test environment variables
test_env_path = Path(__file__).parent.parent.parent.parent / ".env.test"
load_dotenv(test_env_path)

# Import after environment setup
from lingocards.models.vocabulary import Difficulty, VocabularyWord

fake = Faker()


@pytest.fixture
def now() -> datetime:
    """A fixed moment used as the current time."""
    return datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source for reproducible jitter and shuffling."""
    return random.Random(1234)


@pytest.fixture
def make_word() -> Callable[..., VocabularyWord]:
    """Factory for vocabulary words with generated text."""

    def _make_word(**overrides) -> VocabularyWord:
        values = {
            "id": fake.unique.uuid4(),
            "word": fake.word(),
            "translation": fake.word(),
            "pronunciation": fake.word().upper(),
            "example_sentence": fake.sentence(),
            "example_translation": fake.sentence(),
            "difficulty": fake.random_element(list(Difficulty)),
            "category": fake.word(),
            "correct_count": 0,
            "incorrect_count": 0,
            "next_review_date": datetime(2024, 3, 15, 12, 0, tzinfo=UTC),
        }
        values.update(overrides)
        return VocabularyWord(**values)

    return _make_word
