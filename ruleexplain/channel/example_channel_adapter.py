"""Example contract channel adapter.

Use this module as a reference when implementing new channel adapters.
Implement BaseContractChannel and register the provider in ChannelFactory.
"""

import itertools

from ruleexplain.channel.base import BaseContractChannel
from ruleexplain.channel.exceptions import AcceptanceError, SubmissionRejectedError
from ruleexplain.channel.models import SubmissionReceipt
from ruleexplain.keys.key_deriver import DEFAULT_KEY_LENGTH, derive_key
from ruleexplain.logging.logger import Log


class ExampleContractChannel(BaseContractChannel):
    """In-memory stand-in for the explanation contract.

    No network calls. Accepted clauses get a canned explanation written under
    their derived key once `ready_after_queries` lookups have missed, which
    mimics the out-of-band writer. Useful for local development and tests.
    """

    def __init__(
        self,
        *,
        ready_after_queries: int = 3,
        not_found_sentinel: str = "Explanation not found",
        key_max_length: int = DEFAULT_KEY_LENGTH,
        explanation_template: str = "In plain English: {clause}",
    ) -> None:
        self._ready_after = ready_after_queries
        self._sentinel = not_found_sentinel
        self._key_max_length = key_max_length
        self._template = explanation_template
        self._tx_ids = itertools.count(1)
        self._pending: dict[str, str] = {}
        self._accepted: dict[str, str] = {}
        self._misses: dict[str, int] = {}
        self._explanations: dict[str, str] = {}

    def submit(self, text: str, sender: str) -> SubmissionReceipt:
        if not sender:
            raise SubmissionRejectedError("Transaction is not signed")
        if not text.strip():
            raise SubmissionRejectedError("Clause must not be empty")
        tx_hash = f"0x{next(self._tx_ids):064x}"
        self._pending[tx_hash] = text
        return SubmissionReceipt(tx_hash=tx_hash, sender=sender)

    def wait_for_acceptance(
        self, receipt: SubmissionReceipt, timeout: float | None = None
    ) -> None:
        _ = timeout
        text = self._pending.pop(receipt.tx_hash, None)
        if text is None:
            raise AcceptanceError(f"Unknown transaction {receipt.tx_hash}")
        key = derive_key(text, self._key_max_length)
        self._accepted[key] = text
        self._misses.setdefault(key, 0)

    def query(self, key: str) -> str:
        if key in self._explanations:
            return self._explanations[key]
        clause = self._accepted.get(key)
        if clause is None:
            return self._sentinel
        if self._misses[key] < self._ready_after:
            self._misses[key] += 1
            return self._sentinel
        self._explanations[key] = self._template.format(clause=clause.strip())
        Log.debug(f"Example channel wrote explanation for key {key!r}")
        return self._explanations[key]
