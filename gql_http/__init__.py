"""The primary :mod:`gql_http` package includes everything you need to
execute GraphQL requests over HTTP:

 - the :func:`gql <gql_http.gql>` method to parse a GraphQL query
 - the :class:`HTTPTransport <gql_http.HTTPTransport>` class sending
   the requests to a single GraphQL endpoint
 - the :func:`raise_for_http_error <gql_http.raise_for_http_error>` helper
   for callers wanting exceptions on HTTP errors
"""

from .__version__ import __version__
from .gql import gql
from .graphql_request import GraphQLRequest
from .transport.exceptions import (
    ClientError,
    HTTPError,
    HTTPStatusClass,
    ServerError,
    classify,
    raise_for_http_error,
)
from .transport.http import HTTPTransport

__all__ = [
    "__version__",
    "gql",
    "ClientError",
    "GraphQLRequest",
    "HTTPError",
    "HTTPStatusClass",
    "HTTPTransport",
    "ServerError",
    "classify",
    "raise_for_http_error",
]
