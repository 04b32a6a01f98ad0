"""Run status values and the rule for moving between them."""

from enum import StrEnum


class Status(StrEnum):
    """Outcome classification of an automation run."""

    SUCCESS = "success"
    """The run completed normally."""

    FAILURE = "failure"
    """The run failed an assertion."""

    ERROR = "error"
    """The run hit an unexpected error."""


TERMINAL_STATUSES = frozenset({Status.FAILURE, Status.ERROR})


def advance_status(current: Status, requested: Status) -> Status:
    """Apply a requested terminal status to the current one.

    A run only ever leaves SUCCESS once: whichever of FAILURE or ERROR is
    requested first is kept, and later requests leave the status unchanged.

    Args:
        current: Status before the transition
        requested: FAILURE or ERROR

    Returns:
        The status after the transition

    Raises:
        ValueError: If requested is not a terminal status

    """
    if requested not in TERMINAL_STATUSES:
        raise ValueError(f"Cannot transition to {requested!r}")
    if current is Status.SUCCESS:
        return requested
    return current
