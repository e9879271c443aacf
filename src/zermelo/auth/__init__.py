"""Authentication module for the Zermelo client."""

from zermelo.api.resources.oauth import normalize_code
from zermelo.auth.token_exchange import exchange_code

__all__ = [
    "exchange_code",
    "normalize_code",
]
