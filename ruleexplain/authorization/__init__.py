from ruleexplain.authorization.base import BaseSigningAuthority
from ruleexplain.authorization.exceptions import AuthorizationError
from ruleexplain.authorization.factory import AuthorityFactory
from ruleexplain.authorization.session import AuthorizationSession, short_identity

__all__ = [
    "AuthorityFactory",
    "AuthorizationError",
    "AuthorizationSession",
    "BaseSigningAuthority",
    "short_identity",
]
