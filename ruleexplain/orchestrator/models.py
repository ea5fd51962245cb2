from dataclasses import dataclass
from enum import Enum


class SubmissionStatus(str, Enum):
    """Lifecycle states of a single submission."""

    IDLE = "idle"
    AWAITING_AUTHORIZATION = "awaiting_authorization"
    SUBMITTING = "submitting"
    AWAITING_ACCEPTANCE = "awaiting_acceptance"
    POLLING = "polling"
    SUCCEEDED = "succeeded"
    TIMED_OUT = "timed_out"
    FAILED = "failed"


TERMINAL_STATUSES = frozenset(
    {SubmissionStatus.SUCCEEDED, SubmissionStatus.TIMED_OUT, SubmissionStatus.FAILED}
)


@dataclass(frozen=True)
class StatusEvent:
    """One entry of the status stream: a state transition plus its payload.

    `attempt` is set while polling, `result` on success, `reason` on failure.
    """

    status: SubmissionStatus
    message: str
    attempt: int | None = None
    result: str | None = None
    reason: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


@dataclass(frozen=True)
class Found:
    """The explanation is available."""

    text: str


@dataclass(frozen=True)
class NotFound:
    """Nothing has been written under the key yet."""


@dataclass(frozen=True)
class TransientError:
    """The lookup itself failed; treated like NotFound by the poll loop."""

    cause: str


PollResult = Found | NotFound | TransientError
