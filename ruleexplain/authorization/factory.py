from ruleexplain.authorization.base import BaseSigningAuthority
from ruleexplain.authorization.rpc_authority import RpcSigningAuthority
from ruleexplain.authorization.static_authority import StaticSigningAuthority
from ruleexplain.channel.json_rpc_client import JsonRpcClient
from ruleexplain.config.settings import Settings


class AuthorityFactory:
    """Creates the signing authority adapter selected in settings."""

    @classmethod
    def create(
        cls, settings: Settings, rpc_client: JsonRpcClient | None = None
    ) -> BaseSigningAuthority:
        provider = settings.authority_provider.lower()
        if provider == "static":
            return StaticSigningAuthority(settings.account_address)
        if provider == "rpc":
            client = rpc_client or JsonRpcClient(
                url=settings.rpc_url,
                timeout_seconds=settings.rpc_timeout_seconds,
            )
            return RpcSigningAuthority(client)
        raise ValueError(
            f"Unknown authority provider '{provider}'. Choose from: ['static', 'rpc']"
        )
