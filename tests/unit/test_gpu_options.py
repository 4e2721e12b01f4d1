"""
GPU option resolution unit tests.

RUNNER_VISIBLE_DEVICES is cleared by the autouse environment fixture and set
with monkeypatch where a test needs it.
"""

import logging

import pytest

from dockerhooks.utils import process_gpu_options


LOGGER = "dockerhooks.utils.gpu_options"


@pytest.mark.unit
class TestNoPlaceholder:
    """Options without the placeholder are untouched."""

    @pytest.mark.parametrize("value", [
        "--memory=2g",
        "  --memory=2g  ",
        "--gpus all",
        "--gpus=RUNNER_DECIDE",
        "",
        None,
    ])
    def test_returned_unchanged(self, value, monkeypatch):
        """Input comes back byte for byte."""
        monkeypatch.setenv("RUNNER_VISIBLE_DEVICES", "0")

        assert process_gpu_options(value) == value


@pytest.mark.unit
class TestDevicesUnset:
    """Placeholder present, no visible devices."""

    def test_placeholder_removed(self, caplog):
        """The flag is dropped and a warning logged."""
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            assert process_gpu_options("--gpus runner_decide") == ""

        assert "GPU allocation will be skipped" in caplog.text

    def test_empty_value_counts_as_unset(self, monkeypatch):
        """An empty variable behaves like a missing one."""
        monkeypatch.setenv("RUNNER_VISIBLE_DEVICES", "")

        assert process_gpu_options("--gpus=runner_decide") == ""

    def test_other_options_kept_and_trimmed(self):
        """Only the placeholder flag is removed."""
        assert (
            process_gpu_options("--gpus \"runner_decide\" --memory=2g")
            == "--memory=2g"
        )

    def test_all_occurrences_removed(self):
        """Every placeholder is removed."""
        result = process_gpu_options("--gpus runner_decide --cpus 2 --gpus='runner_decide'")

        assert result == "--cpus 2"


@pytest.mark.unit
class TestDevicesSet:
    """Placeholder present, visible devices exported."""

    @pytest.fixture(autouse=True)
    def devices(self, monkeypatch):
        monkeypatch.setenv("RUNNER_VISIBLE_DEVICES", "0,1")

    @pytest.mark.parametrize("value,expected", [
        ("--gpus runner_decide", '--gpus "0,1"'),
        ("--gpus=runner_decide", '--gpus="0,1"'),
        ("--gpus 'runner_decide'", '--gpus "0,1"'),
        ('--gpus "runner_decide"', '--gpus "0,1"'),
        ("--memory=2g --gpus  runner_decide --rm", '--memory=2g --gpus  "0,1" --rm'),
    ])
    def test_value_substituted(self, value, expected):
        """The prefix and separator are kept, the value is double quoted."""
        assert process_gpu_options(value) == expected

    def test_all_occurrences_substituted(self):
        """Every placeholder is replaced."""
        assert (
            process_gpu_options("--gpus runner_decide --gpus=runner_decide")
            == '--gpus "0,1" --gpus="0,1"'
        )

    def test_mismatched_quotes_are_not_matched_as_quoted(self):
        """Opening and closing quote characters must be the same."""
        value = "--gpus 'runner_decide\""

        assert process_gpu_options(value) == value

    def test_logs_substituted_value(self, caplog):
        """An info message names the devices."""
        with caplog.at_level(logging.INFO, logger=LOGGER):
            process_gpu_options("--gpus runner_decide")

        assert "--gpus 0,1" in caplog.text

    def test_device_value_inserted_literally(self, monkeypatch):
        """Backslashes and group references in the value are not expanded."""
        monkeypatch.setenv("RUNNER_VISIBLE_DEVICES", r"\1\g<0>")

        assert process_gpu_options("--gpus runner_decide") == r'--gpus "\1\g<0>"'
