from ruleexplain.keys.key_deriver import DEFAULT_KEY_LENGTH, derive_key

__all__ = ["DEFAULT_KEY_LENGTH", "derive_key"]
