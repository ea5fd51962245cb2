class AuthorizationError(Exception):
    """Raised when no signing authority is available or the user declines."""
