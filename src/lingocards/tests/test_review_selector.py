"""Tests for due-word selection."""
import random
from datetime import timedelta

import pytest

from lingocards.services.review_selector import (
    count_due_words,
    get_due_words,
    select_words_for_review,
    urgency,
)


@pytest.fixture
def mixed_vocabulary(make_word, now):
    """Words with random history and review dates around ``now``."""
    rng = random.Random(99)
    return [
        make_word(
            correct_count=rng.randint(0, 10),
            incorrect_count=rng.randint(0, 10),
            next_review_date=now + timedelta(hours=rng.randint(-72, 72)),
        )
        for _ in range(60)
    ]


def test_urgency_prefers_missed_words(make_word) -> None:
    """Test that missed words are more urgent than known ones."""
    known = make_word(correct_count=8, incorrect_count=0)
    missed = make_word(correct_count=2, incorrect_count=3)
    assert urgency(known) == pytest.approx(1 / 9)
    assert urgency(missed) == pytest.approx(4 / 3)
    assert urgency(make_word()) == 1.0


def test_get_due_words_filters_exactly(mixed_vocabulary, now) -> None:
    """Test that exactly the words due at ``now`` are returned, in input order."""
    due = get_due_words(mixed_vocabulary, now)
    assert due == [word for word in mixed_vocabulary if word.next_review_date <= now]
    assert count_due_words(mixed_vocabulary, now) == len(due)


def test_get_due_words_includes_boundary(make_word, now) -> None:
    """Test that a word due exactly now is included."""
    at_now = make_word(next_review_date=now)
    later = make_word(next_review_date=now + timedelta(microseconds=1))
    assert get_due_words([at_now, later], now) == [at_now]


def test_get_due_words_is_idempotent(mixed_vocabulary, now) -> None:
    """Test that repeated calls give identical results and leave input untouched."""
    snapshot = list(mixed_vocabulary)
    first = get_due_words(mixed_vocabulary, now)
    second = get_due_words(mixed_vocabulary, now)
    assert first == second
    assert mixed_vocabulary == snapshot


def test_get_due_words_empty() -> None:
    """Test an empty vocabulary."""
    assert get_due_words([]) == []
    assert select_words_for_review([]) == []


def test_select_most_urgent_first(make_word, now) -> None:
    """Test that the word with more mistakes comes first."""
    word_a = make_word(correct_count=8, incorrect_count=0)
    word_b = make_word(correct_count=2, incorrect_count=3)
    assert select_words_for_review([word_a, word_b], 10, now) == [word_b, word_a]


def test_select_skips_words_not_due(make_word, now) -> None:
    """Test that words with a future review date are never selected."""
    future = make_word(correct_count=0, incorrect_count=9, next_review_date=now + timedelta(days=1))
    due = make_word(correct_count=9, incorrect_count=0)
    assert select_words_for_review([future, due], 10, now) == [due]


def test_select_keeps_input_order_for_ties(make_word, now) -> None:
    """Test that words with equal urgency keep their relative order."""
    first = make_word(correct_count=1, incorrect_count=1)
    second = make_word(correct_count=3, incorrect_count=3)
    urgent = make_word(correct_count=0, incorrect_count=4)
    third = make_word(correct_count=0, incorrect_count=0)
    selected = select_words_for_review([first, second, urgent, third], 10, now)
    assert selected == [urgent, first, second, third]


def test_select_cap_and_subset(mixed_vocabulary, now) -> None:
    """Test the size cap and that no more urgent word is left out."""
    due = get_due_words(mixed_vocabulary, now)
    for max_words in (1, 5, 10, len(due), len(due) + 5):
        selected = select_words_for_review(mixed_vocabulary, max_words, now)
        assert len(selected) == min(max_words, len(due))
        assert all(word in due for word in selected)
        assert len({word.id for word in selected}) == len(selected)

        cutoff = urgency(selected[-1])
        for word in due:
            if urgency(word) > cutoff:
                assert word in selected

        urgencies = [urgency(word) for word in selected]
        assert urgencies == sorted(urgencies, reverse=True)


def test_select_does_not_reorder_input(mixed_vocabulary, now) -> None:
    """Test that the caller's list is left as it was."""
    snapshot = list(mixed_vocabulary)
    select_words_for_review(mixed_vocabulary, 5, now)
    assert mixed_vocabulary == snapshot


def test_select_default_session_size(make_word, now) -> None:
    """Test that at most ten words are selected by default."""
    vocabulary = [make_word() for _ in range(25)]
    assert len(select_words_for_review(vocabulary, now=now)) == 10


if __name__ == "__main__":
    pytest.main([__file__])
