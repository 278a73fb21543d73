"""Tests for session word selection."""
import random
from datetime import timedelta

import pytest

from lingocards.config import LearningSettings
from lingocards.models.session_models import SessionMode
from lingocards.services.review_selector import get_due_words, urgency
from lingocards.services.session_builder import SessionBuilder


@pytest.fixture
def learning_settings() -> LearningSettings:
    """Learning settings with the default session sizes."""
    return LearningSettings(
        review_session_size=10,
        test_session_size=10,
        test_refresher_words=5,
        learn_session_size=10,
        learn_mastery_threshold=5,
        fallback_session_size=5,
    )


@pytest.fixture
def builder(learning_settings: LearningSettings, rng: random.Random) -> SessionBuilder:
    """Create a session builder with a seeded random source."""
    return SessionBuilder(learning_settings, rng)


@pytest.fixture
def vocabulary(make_word, now):
    """Four due words followed by eight words due later."""
    due = [
        make_word(correct_count=4, incorrect_count=0),
        make_word(correct_count=1, incorrect_count=3),
        make_word(correct_count=2, incorrect_count=2),
        make_word(correct_count=0, incorrect_count=1, next_review_date=now - timedelta(days=2)),
    ]
    later = [
        make_word(correct_count=6, incorrect_count=1, next_review_date=now + timedelta(days=i + 1))
        for i in range(8)
    ]
    return due + later


def test_review_words(builder: SessionBuilder, vocabulary, now) -> None:
    """Test that review sessions hold the due words, most urgent first."""
    words = builder.build(vocabulary, SessionMode.REVIEW, now)
    assert words == sorted(get_due_words(vocabulary, now), key=urgency, reverse=True)


def test_test_words_include_all_due_words(builder: SessionBuilder, vocabulary, now) -> None:
    """Test that test sessions mix every due word with refreshers."""
    words = builder.build(vocabulary, SessionMode.TEST, now)
    due = get_due_words(vocabulary, now)
    ids = [word.id for word in words]

    assert len(ids) == len(set(ids))
    assert len(words) == len(due) + 5
    assert all(word in words for word in due)
    refreshers = [word for word in words if word not in due]
    assert len(refreshers) == 5
    assert all(not word.is_due(now) for word in refreshers)


def test_test_words_reproducible(learning_settings: LearningSettings, vocabulary, now) -> None:
    """Test that the same seed gives the same test session."""
    first = SessionBuilder(learning_settings, random.Random(5)).test_words(vocabulary, now)
    second = SessionBuilder(learning_settings, random.Random(5)).test_words(vocabulary, now)
    assert first == second


def test_test_words_capped_by_session_size(builder: SessionBuilder, make_word, now) -> None:
    """Test that many due words leave no room for refreshers."""
    due = [make_word(correct_count=i % 4, incorrect_count=i % 3) for i in range(15)]
    later = [make_word(next_review_date=now + timedelta(days=3)) for _ in range(5)]
    words = builder.test_words(due + later, now)

    assert len(words) == 10
    assert all(word in due for word in words)
    cutoff = min(urgency(word) for word in words)
    assert all(word in words for word in due if urgency(word) > cutoff)


def test_test_words_small_vocabulary(builder: SessionBuilder, make_word, now) -> None:
    """Test a vocabulary smaller than the session."""
    vocabulary = [
        make_word(),
        make_word(next_review_date=now + timedelta(days=1)),
        make_word(next_review_date=now + timedelta(days=2)),
    ]
    words = builder.test_words(vocabulary, now)
    assert sorted(word.id for word in words) == sorted(word.id for word in vocabulary)


def test_learn_words(builder: SessionBuilder, make_word) -> None:
    """Test that learn sessions pick unmastered words, weakest first."""
    mastered = make_word(correct_count=5, incorrect_count=0)
    weak = make_word(correct_count=1, incorrect_count=4)
    middling = make_word(correct_count=2, incorrect_count=2)
    fresh = make_word(correct_count=0, incorrect_count=0)
    words = builder.learn_words([mastered, fresh, middling, weak])
    assert words == [weak, fresh, middling]


def test_learn_words_capped(builder: SessionBuilder, make_word) -> None:
    """Test the learn session size."""
    vocabulary = [make_word() for _ in range(15)]
    assert builder.learn_words(vocabulary) == vocabulary[:10]


def test_fallback_when_nothing_selected(builder: SessionBuilder, make_word, now) -> None:
    """Test that an empty selection falls back to the first words."""
    vocabulary = [
        make_word(correct_count=9, next_review_date=now + timedelta(days=4))
        for _ in range(8)
    ]
    assert builder.build(vocabulary, SessionMode.REVIEW, now) == vocabulary[:5]
    assert builder.build(vocabulary, SessionMode.LEARN, now) == vocabulary[:5]


def test_build_empty_vocabulary(builder: SessionBuilder, now) -> None:
    """Test that an empty vocabulary gives an empty session."""
    for mode in SessionMode:
        assert builder.build([], mode, now) == []


if __name__ == "__main__":
    pytest.main([__file__])
