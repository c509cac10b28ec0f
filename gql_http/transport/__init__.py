from .http import HTTPTransport, ResponseRecord
from .transport import Transport

__all__ = [
    "HTTPTransport",
    "ResponseRecord",
    "Transport",
]
