"""Base resource for API endpoints."""

import logging
from typing import Any

import httpx

from zermelo.api.exceptions import (
    BodyReadError,
    MalformedResponseError,
    TransportError,
    UnexpectedStatusError,
)
from zermelo.config import get_settings

logger = logging.getLogger(__name__)


def _error_detail(response: httpx.Response) -> str | None:
    """Pull a human readable message out of an error body, if there is one.

    Zermelo wraps errors as {"response": {"status": 403, "message": "..."}},
    the token endpoint answers with OAuth style {"error": "..."} bodies.
    """
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None

    envelope = data.get("response")
    if isinstance(envelope, dict) and isinstance(envelope.get("message"), str):
        return envelope["message"] or None
    for key in ("error_description", "error"):
        if isinstance(data.get(key), str):
            return data[key]
    return None


def _read_error_detail(response: httpx.Response) -> str | None:
    """Read an error body for its message; a body that breaks off has none."""
    try:
        response.read()
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.debug(f"Could not read error body ({response.status_code}): {e}")
        return None
    return _error_detail(response)


class BaseResource:
    """Base class for API resources.

    All resource classes should inherit from this to get:
    - Access to the HTTP client
    - Common request/response handling
    - Consistent error handling
    """

    def __init__(self, client: httpx.Client, school: str):
        """Initialize the resource.

        Args:
            client: HTTP client instance
            school: Validated school code, the first label of the portal host
        """
        self._client = client
        self._school = school

    @property
    def base_url(self) -> str:
        """Get the base URL for this school's Zermelo API."""
        return get_settings().portal_url(self._school)

    def _send(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """Send a request, check the status, then read the whole body.

        The status is checked before the body is read: a non-200 response
        is always UnexpectedStatusError, even when its body breaks off.
        """
        request = self._client.build_request(method, f"{self.base_url}{endpoint}", **kwargs)
        logger.debug(f"{method} {request.url.copy_remove_param('access_token')}")

        try:
            response = self._client.send(request, stream=True)
        except httpx.TransportError as e:
            raise TransportError(f"Could not make request: {e}") from e

        logger.debug(f"{method} {endpoint} -> {response.status_code}")

        try:
            if response.status_code != 200:
                raise UnexpectedStatusError(response.status_code, _read_error_detail(response))
            try:
                response.read()
            except (httpx.HTTPError, httpx.StreamError) as e:
                raise BodyReadError(f"Could not read response body: {e}", response.status_code) from e
        finally:
            response.close()

        return response

    def _handle_response(self, response: httpx.Response) -> Any:
        """Decode the JSON body of a successful response."""
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Could not parse body as JSON: {e}") from e

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        """Make an API request."""
        response = self._send(method, endpoint, **kwargs)
        return self._handle_response(response)

    def _get(self, endpoint: str, **kwargs) -> Any:
        """Convenience method for GET requests."""
        return self._request("GET", endpoint, **kwargs)

    def _post(self, endpoint: str, **kwargs) -> Any:
        """Convenience method for POST requests."""
        return self._request("POST", endpoint, **kwargs)
