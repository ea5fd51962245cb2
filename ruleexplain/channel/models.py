from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionReceipt:
    """Handle for a submitted write call, used to await its acceptance."""

    tx_hash: str
    sender: str
