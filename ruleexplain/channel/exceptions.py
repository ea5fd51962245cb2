class ChannelError(Exception):
    """Base exception for all contract channel errors."""


class ChannelNetworkError(ChannelError):
    """Raised when the node cannot be reached or answers with an HTTP error."""


class JsonRpcError(ChannelError):
    """Raised when the node returns a JSON-RPC error object."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"JSON-RPC error {code}: {message}")
        self.code = code
        self.message = message


class SubmissionRejectedError(ChannelError):
    """Raised when the write call is rejected before acceptance."""


class AcceptanceError(ChannelError):
    """Raised when a submitted transaction fails to be accepted."""


class AcceptanceTimeoutError(AcceptanceError):
    """Raised when acceptance is not reported within the configured timeout."""


class QueryError(ChannelError):
    """Raised when a single read round-trip fails."""
