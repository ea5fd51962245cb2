from typing import ClassVar

from ruleexplain.channel.base import BaseContractChannel
from ruleexplain.channel.example_channel_adapter import ExampleContractChannel
from ruleexplain.channel.json_rpc_client import JsonRpcClient
from ruleexplain.channel.rpc_contract_channel import RpcContractChannel
from ruleexplain.config.settings import Settings


class ChannelFactory:
    """Creates the configured contract channel adapter."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("example", "rpc")

    @classmethod
    def create(
        cls, settings: Settings, rpc_client: JsonRpcClient | None = None
    ) -> BaseContractChannel:
        """Create a configured channel from application settings."""
        provider = settings.channel_provider.lower()
        if provider == "example":
            return ExampleContractChannel(
                ready_after_queries=settings.example_ready_after_queries,
                not_found_sentinel=settings.not_found_sentinel,
                key_max_length=settings.key_max_length,
            )
        if provider == "rpc":
            client = rpc_client or JsonRpcClient(
                url=settings.rpc_url,
                timeout_seconds=settings.rpc_timeout_seconds,
            )
            return RpcContractChannel(
                client=client,
                contract_address=settings.contract_address,
                receipt_poll_interval_seconds=settings.receipt_poll_interval_seconds,
            )
        raise ValueError(
            f"Unknown channel provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
