"""Tests for Result status tracking and data logging."""

import logging

import pytest

from automator.flags import Flags
from automator.logger import Level, Logger
from automator.models.config import Config
from automator.models.result import MissingKeyError, Result
from automator.models.status import Status
from automator.testing.factories import ConfigFactory
from automator.timing import Timer


@pytest.fixture
def config() -> Config:
    """Create a config with a debug log level."""
    return Config(id="run-1", log_level=Level.DEBUG, flags=Flags({"a": 1}))


@pytest.fixture
def result(config: Config) -> Result:
    """Create a fresh result."""
    return Result(config)


class TestConstruction:
    """Tests for Result construction."""

    def test_starts_as_success(self, result: Result) -> None:
        """A new result is a success."""
        assert result.status is Status.SUCCESS
        assert result.is_success()
        assert not result.is_failure()
        assert not result.is_error()

    def test_keeps_config_reference(self, config: Config, result: Result) -> None:
        """Holds the config it was created from."""
        assert result.config is config
        assert result.id == "run-1"

    def test_creates_logger_at_config_level(self, result: Result) -> None:
        """Creates a logger at the config's log level."""
        assert isinstance(result.logger, Logger)
        assert result.logger.level is Level.DEBUG
        assert result.logger.entries == ()

    def test_creates_unstarted_timer(self, result: Result) -> None:
        """Creates a timer with no entries."""
        assert isinstance(result.timer, Timer)
        assert result.timer.entries == ()

    def test_starts_with_empty_data_log(self, result: Result) -> None:
        """Starts with an empty data log."""
        assert result.data_log == {}

    def test_collaborators_are_per_result(self, config: Config) -> None:
        """Each result gets its own logger and timer."""
        first, second = Result(config), Result(config)

        assert first.logger is not second.logger
        assert first.timer is not second.timer

    def test_requires_config(self) -> None:
        """Raises TypeError when not given a Config."""
        with pytest.raises(TypeError, match="requires a Config"):
            Result(None)  # type: ignore[arg-type]

    def test_config_is_read_only(self, result: Result) -> None:
        """Does not allow reassigning the config."""
        with pytest.raises(AttributeError):
            result.config = ConfigFactory.build()  # type: ignore[misc]

    def test_logs_creation(self, config: Config, caplog: pytest.LogCaptureFixture) -> None:
        """Logs a debug message naming the run id."""
        with caplog.at_level(logging.DEBUG, logger="automator.models.result"):
            Result(config)

        assert "Created result for run run-1" in caplog.text


class TestStatus:
    """Tests for failure/error transitions."""

    def test_failure_then_error_stays_failure(self, result: Result) -> None:
        """The first transition wins when failure comes first."""
        assert result.failure() is Status.FAILURE
        assert result.error() is Status.FAILURE

        assert result.is_failure()
        assert not result.is_error()
        assert not result.is_success()

    def test_error_then_failure_stays_error(self, result: Result) -> None:
        """The first transition wins when error comes first."""
        assert result.error() is Status.ERROR
        assert result.failure() is Status.ERROR

        assert result.is_error()
        assert not result.is_failure()

    def test_repeated_failure_is_idempotent(self, result: Result) -> None:
        """Calling failure twice matches calling it once."""
        result.failure()
        result.failure()

        assert result.status is Status.FAILURE

    def test_logs_transition(self, result: Result, caplog: pytest.LogCaptureFixture) -> None:
        """Logs the status change only when it happens."""
        with caplog.at_level(logging.DEBUG, logger="automator.models.result"):
            result.error()
            result.failure()

        assert caplog.text.count("status:") == 1
        assert "Run run-1 status: success -> error" in caplog.text


class TestRecordData:
    """Tests for record_data."""

    def test_returns_stored_value(self, result: Result) -> None:
        """Returns the value now stored at the key."""
        assert result.record_data("x", 1) == 1
        assert result.data_log == {"x": 1}

    def test_overwrites_existing_key(self, result: Result) -> None:
        """Replaces an earlier value at the same key."""
        result.record_data("x", 1)
        result.record_data("x", 2)

        assert result.data_log["x"] == 2

    def test_accepts_arbitrary_keys(self, result: Result) -> None:
        """Accepts any non-None key, including falsy ones."""
        result.record_data(0, "zero")
        result.record_data("", "empty")
        result.record_data(("a", 1), None)

        assert result.data_log == {0: "zero", "": "empty", ("a", 1): None}

    def test_rejects_none_key(self, result: Result) -> None:
        """Raises MissingKeyError and leaves the data log unchanged."""
        result.record_data("x", 1)

        with pytest.raises(MissingKeyError, match="Key is required!"):
            result.record_data(None, 1)

        assert result.data_log == {"x": 1}

    def test_missing_key_error_is_value_error(self) -> None:
        """MissingKeyError can be caught as ValueError."""
        assert issubclass(MissingKeyError, ValueError)


def test_data_log_is_read_only(result: Result) -> None:
    """Does not allow entries to be removed or changed through data_log."""
    result.record_data("x", 1)

    with pytest.raises(TypeError):
        del result.data_log["x"]  # type: ignore[attr-defined]
    with pytest.raises(TypeError):
        result.data_log["x"] = 2  # type: ignore[index]

    assert result.data_log == {"x": 1}
