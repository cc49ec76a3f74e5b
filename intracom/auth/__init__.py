"""Authentication and authorization."""

from .digest import hash_token, token_matches
from .gate import AuthorizationGate, IAuthorizationGate

__all__ = ["AuthorizationGate", "IAuthorizationGate", "hash_token", "token_matches"]
