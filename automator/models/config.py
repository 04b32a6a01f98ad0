"""Configuration handed to an automation run."""

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator

from automator.flags import Flags
from automator.logger import Level
from automator.models.base import Model

log = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class Config(Model):
    """Identifier, log level and flags for a single run.

    Construction never fails: a missing id gets a generated UUID (an
    explicit ``id=None`` counts as missing), a log level that is not a
    ``Level`` member becomes ``Level.ERROR``, and flags that are neither a
    ``Flags`` instance nor a mapping become empty flags.
    """

    id: Any = Field(default_factory=_new_id, description="Identifier used to track the run")
    log_level: Level = Field(
        default=Level.ERROR, description="Level for the run's logger"
    )
    flags: Flags = Field(default_factory=Flags, description="Flags for the run")

    @field_validator("id", mode="before")
    @classmethod
    def _default_id(cls, value: Any) -> Any:
        if value is None:
            return _new_id()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_log_level(cls, value: Any) -> Level:
        if isinstance(value, Level):
            return value
        return Level.ERROR

    @field_validator("flags", mode="before")
    @classmethod
    def _build_flags(cls, value: Any) -> Flags:
        if isinstance(value, Flags):
            return value
        if value is None or isinstance(value, Mapping):
            return Flags(value)
        log.debug("Ignoring flags of type %s", type(value).__name__)
        return Flags()
