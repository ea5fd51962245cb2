import threading
from collections.abc import Iterator

from ruleexplain.authorization.exceptions import AuthorizationError
from ruleexplain.authorization.session import AuthorizationSession
from ruleexplain.channel.base import BaseContractChannel
from ruleexplain.channel.exceptions import ChannelError
from ruleexplain.config.settings import Settings
from ruleexplain.keys.key_deriver import derive_key
from ruleexplain.logging.logger import Log
from ruleexplain.orchestrator.models import (
    Found,
    NotFound,
    PollResult,
    StatusEvent,
    SubmissionStatus,
    TransientError,
)

AUTHORIZATION_DECLINED = "authorization declined"
TIMEOUT_MESSAGE = (
    "Timeout: The AI took too long. The explanation may still arrive later; "
    "try checking again."
)


class RequestOrchestrator:
    """Drive one submission from authorization to a terminal status.

    Lifecycle: authorize -> submit -> await acceptance -> poll query(key).
    Every transition is yielded as a StatusEvent; the stream always ends with
    exactly one terminal event. Failures along the way become events, they are
    never raised to the caller.
    """

    def __init__(self, channel: BaseContractChannel, settings: Settings) -> None:
        self._channel = channel
        self._settings = settings
        self._cancelled = threading.Event()
        self._in_flight = False
        self._state = StatusEvent(SubmissionStatus.IDLE, "Idle")

    @property
    def state(self) -> StatusEvent:
        """The most recent event of the current (or last) submission."""
        return self._state

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def cancel(self) -> None:
        """Stop polling. The submitted transaction itself is not retracted."""
        Log.info("Cancellation requested")
        self._cancelled.set()

    def submit_and_await(
        self, text: str, authority: AuthorizationSession
    ) -> Iterator[StatusEvent]:
        """Submit a clause and poll for its explanation.

        The submission starts when iteration starts; closing the generator
        early stops further queries.
        """
        if self._in_flight:
            reason = "A submission is already in progress"
            Log.warning(reason)
            yield StatusEvent(
                SubmissionStatus.FAILED, f"Error: {reason}", reason=reason
            )
            return
        if not text.strip():
            yield self._fail("Input is empty")
            return

        self._in_flight = True
        self._cancelled.clear()
        try:
            yield from self._run(text, authority)
        finally:
            self._in_flight = False

    def check_result(self, text: str) -> PollResult:
        """Look up the explanation for an earlier submission once."""
        key = derive_key(text, self._settings.key_max_length)
        if not key:
            return NotFound()
        return self._poll_once(key)

    def _run(self, text: str, authority: AuthorizationSession) -> Iterator[StatusEvent]:
        key = derive_key(text, self._settings.key_max_length)

        yield self._transition(
            SubmissionStatus.AWAITING_AUTHORIZATION, "Connecting to signing account..."
        )
        try:
            identity = authority.identity()
        except AuthorizationError as exc:
            Log.error(f"Authorization failed: {exc}")
            yield self._fail(AUTHORIZATION_DECLINED)
            return

        yield self._transition(
            SubmissionStatus.SUBMITTING, "Please sign the transaction in your wallet..."
        )
        try:
            receipt = self._channel.submit(text, identity)
        except ChannelError as exc:
            yield self._fail(str(exc) or "Submission rejected")
            return

        yield self._transition(
            SubmissionStatus.AWAITING_ACCEPTANCE,
            "Transaction sent! Waiting for block confirmation...",
        )
        try:
            self._channel.wait_for_acceptance(
                receipt, timeout=self._settings.acceptance_timeout_seconds or None
            )
        except ChannelError as exc:
            yield self._fail(str(exc) or "Transaction was not accepted")
            return

        yield from self._poll(key)

    def _poll(self, key: str) -> Iterator[StatusEvent]:
        max_attempts = self._settings.max_poll_attempts
        for attempt in range(1, max_attempts + 1):
            # Interval counts from the end of the previous query.
            if self._cancelled.wait(self._settings.poll_interval_seconds):
                yield self._fail("cancelled")
                return
            yield self._transition(
                SubmissionStatus.POLLING,
                f"AI is processing... (attempt {attempt}/{max_attempts})",
                attempt=attempt,
            )
            if self._cancelled.is_set():
                yield self._fail("cancelled")
                return

            outcome = self._poll_once(key)
            if isinstance(outcome, Found):
                yield self._transition(
                    SubmissionStatus.SUCCEEDED,
                    "Explanation received!",
                    attempt=attempt,
                    result=outcome.text,
                )
                return
            if isinstance(outcome, TransientError):
                Log.warning(f"Polling attempt {attempt} failed, will retry: {outcome.cause}")

        yield self._transition(
            SubmissionStatus.TIMED_OUT, TIMEOUT_MESSAGE, attempt=max_attempts
        )

    def _poll_once(self, key: str) -> PollResult:
        try:
            raw = self._channel.query(key)
        except ChannelError as exc:
            return TransientError(str(exc))
        Log.debug(f"Query for {key!r} returned {raw!r}")
        if raw and raw != self._settings.not_found_sentinel:
            return Found(raw)
        return NotFound()

    def _transition(
        self,
        status: SubmissionStatus,
        message: str,
        *,
        attempt: int | None = None,
        result: str | None = None,
    ) -> StatusEvent:
        event = StatusEvent(status, message, attempt=attempt, result=result)
        self._state = event
        Log.info(f"[{status.value}] {message}")
        return event

    def _fail(self, reason: str) -> StatusEvent:
        event = StatusEvent(SubmissionStatus.FAILED, f"Error: {reason}", reason=reason)
        self._state = event
        Log.error(f"Submission failed: {reason}")
        return event
