from abc import ABC, abstractmethod


class BaseSigningAuthority(ABC):
    """Contract for all signing authority adapters."""

    @abstractmethod
    def authorize(self) -> str:
        """Obtain the identity entitled to sign submissions.

        Returns:
            Non-empty identity string (e.g. an account address).

        Raises:
            AuthorizationError: if no authority is available or the user declines.
        """
