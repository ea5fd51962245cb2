from ruleexplain.authorization.base import BaseSigningAuthority
from ruleexplain.logging.logger import Log


class AuthorizationSession:
    """Resolves the signing identity once per session and caches it.

    A declined attempt is not cached, so the user can try again.
    """

    def __init__(self, authority: BaseSigningAuthority) -> None:
        self._authority = authority
        self._identity: str | None = None

    @property
    def is_authorized(self) -> bool:
        return self._identity is not None

    def identity(self) -> str:
        """Return the cached identity, authorizing on first use.

        Raises:
            AuthorizationError: if the authority declines.
        """
        if self._identity is None:
            self._identity = self._authority.authorize()
            Log.info(f"Authorized as {short_identity(self._identity)}")
        return self._identity


def short_identity(identity: str) -> str:
    """Shorten an address-like identity for display, e.g. 0x1234...abcd."""
    if len(identity) <= 10:
        return identity
    return f"{identity[:6]}...{identity[-4:]}"
