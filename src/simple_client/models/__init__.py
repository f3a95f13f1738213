from .errors import SimpleClientError
from .options import (
    AuthenticatedUser,
    ClientOptions,
    Converter,
    JsonOptions,
    RequestOptions,
    ResponseOptions,
)

__all__ = [
    "AuthenticatedUser",
    "ClientOptions",
    "Converter",
    "JsonOptions",
    "RequestOptions",
    "ResponseOptions",
    "SimpleClientError",
]
