"""Tests for diff engine configuration."""

import pytest


class TestDiffConfig:
    """Test DiffConfig settings."""

    def teardown_method(self):
        """Reset config after each test."""
        from resume_diff.diffing.config import reset_diff_config

        reset_diff_config()

    def test_has_defaults(self, monkeypatch):
        """DiffConfig defaults to the 0.8 significance threshold."""
        from resume_diff.diffing.config import DiffConfig

        monkeypatch.delenv("DIFF_SIGNIFICANCE_THRESHOLD", raising=False)

        config = DiffConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.significance_threshold == 0.8

    def test_reads_from_environment_variables(self, monkeypatch):
        """DiffConfig should read DIFF_-prefixed variables."""
        from resume_diff.diffing.config import DiffConfig

        monkeypatch.setenv("DIFF_SIGNIFICANCE_THRESHOLD", "0.6")

        config = DiffConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.significance_threshold == 0.6

    def test_rejects_out_of_range_threshold(self):
        """Thresholds must lie in [0, 1]."""
        from pydantic import ValidationError

        from resume_diff.diffing.config import DiffConfig

        with pytest.raises(ValidationError):
            DiffConfig(_env_file=None, significance_threshold=1.5)  # type: ignore[call-arg]

    def test_singleton(self):
        """get_diff_config caches until reset."""
        from resume_diff.diffing.config import get_diff_config, reset_diff_config

        first = get_diff_config()
        assert get_diff_config() is first

        reset_diff_config()
        assert get_diff_config() is not first
