"""OAuth resource for exchanging authorization codes."""

import logging

from zermelo.api.base import BaseResource
from zermelo.api.exceptions import AuthFieldMissingError

logger = logging.getLogger(__name__)


def normalize_code(code: str) -> str:
    """Remove all whitespace from an authorization code.

    The portal shows codes in groups ("1234 5678 9012") for readability.
    """
    return "".join(code.split())


class OAuthResource(BaseResource):
    """Resource for the token endpoint."""

    def exchange(self, code: str) -> str:
        """Exchange a one-time authorization code for an access token.

        Args:
            code: Authorization code as shown in the portal

        Returns:
            The access token

        Raises:
            UnexpectedStatusError: If the endpoint does not answer 200
            MalformedResponseError: If the body is not JSON
            AuthFieldMissingError: If the body has no string access_token
        """
        data = self._post(
            "/oauth/token",
            data={
                "grant_type": "authorization_code",
                "code": normalize_code(code),
            },
        )

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not isinstance(access_token, str):
            raise AuthFieldMissingError()

        logger.debug(f"Token exchange successful for school {self._school}")
        return access_token
