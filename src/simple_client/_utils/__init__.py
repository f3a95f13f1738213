from ._auth_header import AuthToken, format_authorization
from ._logs import Logger, default_logger_factory, setup_logging
from ._request_descriptor import RequestDescriptor
from ._request_id import current_request_id, request_id_scope

__all__ = [
    "AuthToken",
    "Logger",
    "RequestDescriptor",
    "current_request_id",
    "default_logger_factory",
    "format_authorization",
    "request_id_scope",
    "setup_logging",
]
