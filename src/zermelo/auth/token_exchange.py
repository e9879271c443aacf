"""Authorization code exchange.

The portal shows a one-time code when an app is linked to an account.
This module trades it for an access token. Tokens are never refreshed.
"""

import httpx

from zermelo.api.client import ZermeloClient


def exchange_code(school: str, code: str, http_client: httpx.Client | None = None) -> str:
    """Exchange an authorization code for an access token.

    Makes exactly one request and does not retry.

    Args:
        school: School code (e.g., 'example' for example.zportal.nl)
        code: Authorization code; whitespace is ignored
        http_client: Optional client to send the request with

    Returns:
        The access token

    Raises:
        ValueError: If the school code is invalid
        ZermeloAPIError: If the exchange fails
    """
    with ZermeloClient(school, http_client=http_client) as client:
        return client.exchange_code(code)
