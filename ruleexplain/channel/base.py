from abc import ABC, abstractmethod

from ruleexplain.channel.models import SubmissionReceipt


class BaseContractChannel(ABC):
    """Contract for all adapters talking to the explanation contract."""

    @abstractmethod
    def submit(self, text: str, sender: str) -> SubmissionReceipt:
        """Send the state-changing explain call for a clause.

        Args:
            text: The raw clause text as entered by the user.
            sender: Authorized identity that signs the call.

        Returns:
            SubmissionReceipt identifying the pending transaction.

        Raises:
            SubmissionRejectedError: if the call is rejected before acceptance.
            ChannelError: on any other failure.
        """

    @abstractmethod
    def wait_for_acceptance(
        self, receipt: SubmissionReceipt, timeout: float | None = None
    ) -> None:
        """Block until the submitted call is durably accepted.

        Args:
            receipt: Receipt returned by submit().
            timeout: Seconds to wait before giving up; None waits forever.

        Raises:
            AcceptanceTimeoutError: if the timeout elapses first.
            AcceptanceError: if the transaction is reported as failed.
        """

    @abstractmethod
    def query(self, key: str) -> str:
        """Look up the stored explanation for a key.

        Returns the stored text, or the not-found sentinel / empty string
        while nothing has been written yet.

        Raises:
            QueryError: if the round-trip fails.
        """
