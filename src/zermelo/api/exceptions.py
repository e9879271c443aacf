"""Exceptions for the Zermelo API."""


class ZermeloAPIError(Exception):
    """Base exception for Zermelo API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(ZermeloAPIError):
    """The request could not be sent or the connection failed."""


class UnexpectedStatusError(ZermeloAPIError):
    """A response was received but its status code is not 200."""

    def __init__(self, status_code: int, detail: str | None = None):
        msg = f"API request failed ({status_code})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg, status_code)
        self.detail = detail


class BodyReadError(ZermeloAPIError):
    """The response body could not be read to completion."""


class MalformedResponseError(ZermeloAPIError):
    """The response body is not the JSON document the endpoint promises.

    ``key`` names the missing envelope key (``"response"`` or ``"data"``)
    when that is the reason.
    """

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class AuthFieldMissingError(ZermeloAPIError):
    """Token response does not contain a string ``access_token``."""

    def __init__(self, message: str = "No access_token in token response"):
        super().__init__(message)
