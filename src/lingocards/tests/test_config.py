"""Tests for configuration settings."""
import pytest

from lingocards.config import (
    LearningSettings,
    ProgressSettings,
    Settings,
    settings,
)


def test_settings_defaults():
    """Test default settings values."""
    assert settings.learning.max_base_interval_days == 7
    assert settings.learning.min_interval_days == 1
    assert settings.learning.jitter_ratio == 0.1
    assert settings.learning.review_session_size == 10
    assert settings.learning.test_session_size == 10
    assert settings.learning.test_refresher_words == 5
    assert settings.learning.test_lives == 5
    assert settings.learning.learn_mastery_threshold == 5
    assert settings.learning.fallback_session_size == 5
    assert settings.progress.xp_per_correct == 10
    assert settings.progress.xp_per_perfect == 5
    assert settings.progress.xp_per_level == 1000
    assert settings.progress.language_xp_per_level == 200


def test_settings_validate_accepts_defaults():
    """Test that default settings are valid."""
    Settings().validate()


@pytest.mark.parametrize(
    "learning",
    [
        LearningSettings(review_session_size=0),
        LearningSettings(test_lives=0),
        LearningSettings(jitter_ratio=1.5),
        LearningSettings(min_interval_days=0),
        LearningSettings(max_base_interval_days=0),
        LearningSettings(test_refresher_words=-1),
    ],
)
def test_settings_validate_rejects_invalid_learning(learning):
    """Test that inconsistent learning settings are rejected."""
    with pytest.raises(ValueError):
        Settings(learning=learning).validate()


def test_settings_validate_rejects_invalid_levels():
    """Test that non-positive level sizes are rejected."""
    with pytest.raises(ValueError):
        Settings(progress=ProgressSettings(xp_per_level=0)).validate()


if __name__ == "__main__":
    pytest.main([__file__])
