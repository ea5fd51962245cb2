from ruleexplain.authorization.base import BaseSigningAuthority
from ruleexplain.authorization.exceptions import AuthorizationError


class StaticSigningAuthority(BaseSigningAuthority):
    """Signing authority whose account is fixed in configuration."""

    def __init__(self, address: str) -> None:
        self._address = address.strip()

    def authorize(self) -> str:
        if not self._address:
            raise AuthorizationError("No signing account configured")
        return self._address
