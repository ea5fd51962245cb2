"""Tests for ChannelFactory."""

from unittest.mock import MagicMock, patch

import pytest

from ruleexplain.channel.base import BaseContractChannel
from ruleexplain.channel.example_channel_adapter import ExampleContractChannel
from ruleexplain.channel.factory import ChannelFactory
from ruleexplain.channel.rpc_contract_channel import RpcContractChannel
from ruleexplain.config.settings import Settings


class TestChannelFactory:
    def test_creates_example_channel(self) -> None:
        channel = ChannelFactory.create(Settings(channel_provider="example"))
        assert isinstance(channel, BaseContractChannel)
        assert isinstance(channel, ExampleContractChannel)

    def test_provider_is_case_insensitive(self) -> None:
        channel = ChannelFactory.create(Settings(channel_provider="EXAMPLE"))
        assert isinstance(channel, ExampleContractChannel)

    def test_creates_rpc_channel_with_shared_client(self) -> None:
        client = MagicMock()
        channel = ChannelFactory.create(Settings(channel_provider="rpc"), client)
        assert isinstance(channel, RpcContractChannel)
        assert channel._client is client

    def test_builds_rpc_client_from_settings(self) -> None:
        settings = Settings(
            channel_provider="rpc",
            rpc_url="http://node.example.com/api",
            rpc_timeout_seconds=12,
        )
        with patch("ruleexplain.channel.factory.JsonRpcClient") as mock_client:
            ChannelFactory.create(settings)
        mock_client.assert_called_once_with(
            url="http://node.example.com/api", timeout_seconds=12
        )

    def test_unknown_provider_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown channel provider"):
            ChannelFactory.create(Settings(channel_provider="carrier-pigeon"))
