"""Lookup key derivation shared by the write path and the read path.

The contract stores each explanation under a key built from the submitted
clause. The client must build the same key to find the result, so this
policy has to stay in lockstep with the contract's.
"""

DEFAULT_KEY_LENGTH = 60


def derive_key(text: str, max_length: int = DEFAULT_KEY_LENGTH) -> str:
    """Return the storage key for a clause: first `max_length` chars, stripped.

    Truncation happens before stripping, so whitespace that lands at the cut
    is dropped too. Inputs sharing the same first `max_length` characters
    map to the same key.
    """
    return text[:max_length].strip()
