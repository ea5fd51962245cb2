import pytest

from ruleexplain.config.settings import Settings

ACCOUNT = "0x9fB29AAc15b9A4B7F17c3385939b007540f4d791"


@pytest.fixture()
def account() -> str:
    return ACCOUNT


@pytest.fixture()
def fast_settings() -> Settings:
    """Settings with polling delays disabled so loops run instantly."""
    return Settings(
        poll_interval_seconds=0,
        receipt_poll_interval_seconds=0,
        account_address=ACCOUNT,
    )
