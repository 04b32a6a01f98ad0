"""Accumulated outcome of an automation run."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from automator.logger import Logger
from automator.models.config import Config
from automator.models.status import Status, advance_status
from automator.timing import Timer

log = logging.getLogger(__name__)


class MissingKeyError(ValueError):
    """Raised when data is recorded without a key."""


class Result:
    """Status, timings, log record and data log of a single run.

    Every result starts as a success. The first call to ``failure`` or
    ``error`` decides the final status; later calls do not change it.
    """

    def __init__(self, config: Config) -> None:
        if not isinstance(config, Config):
            raise TypeError(f"Result requires a Config, got {type(config).__name__}")

        self._config = config
        self._status = Status.SUCCESS
        self._logger = Logger(level=config.log_level)
        self._timer = Timer()
        self._data_log: dict[Any, Any] = {}
        log.debug("Created result for run %s", config.id)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def id(self) -> Any:
        return self._config.id

    @property
    def status(self) -> Status:
        return self._status

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def timer(self) -> Timer:
        return self._timer

    @property
    def data_log(self) -> Mapping[Any, Any]:
        """Read-only view of the recorded data."""
        return MappingProxyType(self._data_log)

    def record_data(self, key: Any, value: Any) -> Any:
        """Store a value in the data log, replacing any previous value.

        Args:
            key: Data log key, must not be None
            value: Value to store

        Returns:
            The value now stored at the key

        Raises:
            MissingKeyError: If key is None

        """
        if key is None:
            raise MissingKeyError("Key is required!")
        self._data_log[key] = value
        return self._data_log[key]

    def failure(self) -> Status:
        """Mark the run as failed unless it already left SUCCESS."""
        return self._advance(Status.FAILURE)

    def error(self) -> Status:
        """Mark the run as errored unless it already left SUCCESS."""
        return self._advance(Status.ERROR)

    def is_success(self) -> bool:
        return self._status is Status.SUCCESS

    def is_failure(self) -> bool:
        return self._status is Status.FAILURE

    def is_error(self) -> bool:
        return self._status is Status.ERROR

    def _advance(self, requested: Status) -> Status:
        previous = self._status
        self._status = advance_status(previous, requested)
        if self._status is not previous:
            log.debug("Run %s status: %s -> %s", self.id, previous, self._status)
        return self._status
