from ._config import Config
from ._json_converter import JsonConverter, PydanticJsonConverter
from ._request_builder import RequestBuilder
from ._simple_client import Method, SimpleClient
from ._transport import HttpxTransport, Transport
from ._utils import (
    AuthToken,
    RequestDescriptor,
    current_request_id,
    format_authorization,
    request_id_scope,
)
from .models import (
    AuthenticatedUser,
    ClientOptions,
    JsonOptions,
    RequestOptions,
    ResponseOptions,
    SimpleClientError,
)

__all__ = [
    "AuthToken",
    "AuthenticatedUser",
    "ClientOptions",
    "Config",
    "HttpxTransport",
    "JsonConverter",
    "JsonOptions",
    "Method",
    "PydanticJsonConverter",
    "RequestBuilder",
    "RequestDescriptor",
    "RequestOptions",
    "ResponseOptions",
    "SimpleClient",
    "SimpleClientError",
    "Transport",
    "current_request_id",
    "format_authorization",
    "request_id_scope",
]
