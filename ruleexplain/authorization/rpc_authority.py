from ruleexplain.authorization.base import BaseSigningAuthority
from ruleexplain.authorization.exceptions import AuthorizationError
from ruleexplain.channel.exceptions import ChannelNetworkError, JsonRpcError
from ruleexplain.channel.json_rpc_client import JsonRpcClient

_USER_REJECTED = 4001


class RpcSigningAuthority(BaseSigningAuthority):
    """Asks the node (or wallet bridge) for the accounts it may sign with."""

    def __init__(self, client: JsonRpcClient) -> None:
        self._client = client

    def authorize(self) -> str:
        try:
            accounts = self._client.call("eth_requestAccounts", [])
        except JsonRpcError as exc:
            if exc.code == _USER_REJECTED:
                raise AuthorizationError("authorization declined") from exc
            raise AuthorizationError(f"Account request failed: {exc.message}") from exc
        except ChannelNetworkError as exc:
            raise AuthorizationError(f"Signing authority unavailable: {exc}") from exc
        if not isinstance(accounts, list) or not accounts:
            raise AuthorizationError("Signing authority returned no accounts")
        account = accounts[0]
        if not isinstance(account, str) or not account:
            raise AuthorizationError("Signing authority returned an invalid account")
        return account
