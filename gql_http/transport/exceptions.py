from enum import Enum
from typing import Any, Optional


class TransportError(Exception):
    pass


class TransportProtocolError(TransportError):
    """Transport protocol error.

    The answer received from the server does not correspond to the transport protocol.
    """


class TransportConnectionFailed(TransportError):
    """Transport connection failed.

    This exception is raised when the HTTP request could not be sent or no
    response was received (DNS failure, connection refused, TLS error, timeout).
    """


class HTTPError(TransportError):
    """The server answered with an HTTP error status.

    The response is kept so that the caller can inspect the details.
    """

    def __init__(self, msg: str, response: Optional[Any] = None):
        super().__init__(msg)
        self.response = response


class ClientError(HTTPError):
    """HTTP client error (status codes 400-499)."""


class ServerError(HTTPError):
    """HTTP server error (status codes 500-599)."""


class HTTPStatusClass(Enum):
    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    OTHER_ERROR = "other_error"


def classify(status_code: int) -> HTTPStatusClass:
    """Map an HTTP status code to its severity class."""
    if 200 <= status_code < 300:
        return HTTPStatusClass.SUCCESS
    if 400 <= status_code < 500:
        return HTTPStatusClass.CLIENT_ERROR
    if 500 <= status_code < 600:
        return HTTPStatusClass.SERVER_ERROR
    return HTTPStatusClass.OTHER_ERROR


def http_error_message(status_code: int, reason: Optional[str], body: str) -> str:
    """Build the error message for a failed HTTP answer.

    ``"<status> <reason>"`` when the body is empty,
    ``"<status> <reason>: <body>"`` otherwise. The body is included verbatim.
    """
    message = f"{status_code} {reason or ''}".rstrip()

    if body:
        message = f"{message}: {body}"

    return message


def response_text(response: Any) -> str:
    """Body of a :class:`requests.Response` as text.

    The charset of the Content-Type header is used when there is one,
    otherwise the body is decoded as UTF-8.
    """
    content_type = response.headers.get("Content-Type", "")

    if "charset=" in content_type.lower():
        return response.text

    return response.content.decode("utf-8", errors="replace")


def raise_for_http_error(response: Any) -> None:
    """Raise an exception if the given :class:`requests.Response` is an error.

    Nothing is raised for a 2xx answer.

    :raises ClientError: for a 4xx status
    :raises ServerError: for a 5xx status
    :raises HTTPError: for any other non-2xx status
    """
    status_class = classify(response.status_code)

    if status_class is HTTPStatusClass.SUCCESS:
        return

    message = http_error_message(
        response.status_code, response.reason, response_text(response)
    )

    if status_class is HTTPStatusClass.CLIENT_ERROR:
        raise ClientError(message, response)
    if status_class is HTTPStatusClass.SERVER_ERROR:
        raise ServerError(message, response)
    raise HTTPError(message, response)
