"""Review scheduling for vocabulary words.

The interval until the next review grows with the word's historical
accuracy: a word that was never missed waits ``max_base_interval_days``
(7 by default), a word that was never answered correctly waits one day.
A small random jitter (+-10% by default) keeps words reviewed together from
becoming due together again.

All functions are pure apart from drawing from the random source, which can
be injected for reproducible results.
"""
import logging
import math
import random
from datetime import datetime, timedelta, UTC
from typing import Optional

from lingocards.config import settings

logger = logging.getLogger(__name__)


def success_rate(correct_count: int, incorrect_count: int) -> float:
    """Share of correct answers; 0.0 for a word with no answers yet."""
    return correct_count / max(1, correct_count + incorrect_count)


def base_interval_days(correct_count: int, incorrect_count: int) -> int:
    """Integer interval in days proportional to accuracy, before jitter."""
    rate = success_rate(correct_count, incorrect_count)
    return max(
        settings.learning.min_interval_days,
        math.floor(rate * settings.learning.max_base_interval_days),
    )


def apply_jitter(interval_days: int, rng: Optional[random.Random] = None) -> int:
    """Scale an interval by a random factor in ``[1 - ratio, 1 + ratio)``.

    The result is floored and never drops below the minimum interval.
    """
    rng = rng or random
    ratio = settings.learning.jitter_ratio
    jitter = rng.random() * 2 * ratio - ratio
    return max(settings.learning.min_interval_days, math.floor(interval_days * (1 + jitter)))


def compute_next_review_date(
    correct_count: int,
    incorrect_count: int,
    last_reviewed: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> datetime:
    """Calculate when a word becomes due again.

    Args:
        correct_count: Number of correct answers so far, must be >= 0.
        incorrect_count: Number of incorrect answers so far, must be >= 0.
        last_reviewed: Moment of the latest answer. Defaults to now (UTC).
        rng: Random source for the jitter. Defaults to the ``random`` module.

    Returns:
        ``last_reviewed`` moved forward by a whole number of calendar days.
    """
    if last_reviewed is None:
        last_reviewed = datetime.now(UTC)

    base = base_interval_days(correct_count, incorrect_count)
    interval = apply_jitter(base, rng)
    logger.debug(
        f"Scheduling after {correct_count} correct / {incorrect_count} incorrect: "
        f"base {base} days, final {interval} days"
    )
    return last_reviewed + timedelta(days=interval)
