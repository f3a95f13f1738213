import json
from typing import Any, Callable, Optional
from urllib.parse import urlencode

from ._json_converter import JsonConverter
from ._utils._auth_header import format_authorization
from ._utils._logs import Logger
from ._utils._request_descriptor import RequestDescriptor
from ._utils.constants import (
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CACHE_CONTROL,
    HEADER_CONTENT_TYPE,
    HEADER_PRAGMA,
    HEADER_REQUEST_ID,
)
from .models.options import RequestOptions


def to_json_text(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


class RequestBuilder:
    """Turns a method and call options into a :class:`RequestDescriptor`.

    Building does no I/O. Header steps run in a fixed order and later steps
    overwrite earlier ones:

    1. ``pragma`` / ``cache-control`` set to ``no-cache``
    2. ``request-id`` when the provider returns a value
    3. ``Authorization`` from ``options.token``, else from ``options.user``
    4. client headers of ``options.user``, kept only where not already set
    5. JSON body and content negotiation headers
    6. form body, which replaces a JSON body
    7. ``options.fetch_options``, whose headers are merged per key
    """

    def __init__(
        self,
        json_converter: JsonConverter,
        request_id: Callable[[], str],
        logger: Callable[[str, object], Logger],
        owner: Optional[object] = None,
    ) -> None:
        self._json_converter = json_converter
        self._request_id = request_id
        self._logger_factory = logger
        self._owner = owner if owner is not None else self

    def build(self, method: str, options: RequestOptions) -> RequestDescriptor:
        logger = self._logger_factory("build_request", self._owner)

        headers: dict[str, str] = {
            HEADER_PRAGMA: "no-cache",
            HEADER_CACHE_CONTROL: "no-cache",
        }
        body: Optional[str] = None

        request_id = self._request_id()
        if request_id:
            headers[HEADER_REQUEST_ID] = request_id

        if options.token:
            logger.debug("setting authorization header from given token")
            headers[HEADER_AUTHORIZATION] = options.token
        elif options.user is not None:
            user_token = options.user.get_token()
            if user_token:
                logger.debug("setting authorization header from given user")
                headers[HEADER_AUTHORIZATION] = (
                    user_token
                    if isinstance(user_token, str)
                    else format_authorization(user_token)
                )

        if options.user is not None:
            client_headers = options.user.get_client_headers()
            if client_headers:
                headers = {**client_headers, **headers}

        if options.mode == "json" and options.json is not None:
            logger.debug("setting json body")
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
            headers[HEADER_ACCEPT] = CONTENT_TYPE_JSON

            if options.serializer is False:
                body = to_json_text(options.json)
            elif callable(options.serializer):
                logger.debug("serializing body")
                body = to_json_text(options.serializer(options.json))
            else:
                body = to_json_text(
                    self._json_converter.serialize(options.json, None, unsafe=True)
                )

        if options.form is not None:
            logger.debug("setting form body")
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_FORM
            body = urlencode(dict(options.form))

        descriptor = RequestDescriptor(method=method, headers=headers, body=body)

        if options.fetch_options:
            for key, value in options.fetch_options.items():
                if key == "method":
                    descriptor.method = value
                elif key == "body":
                    descriptor.body = value
                elif key == "headers":
                    descriptor.headers = {**headers, **(value or {})}
                else:
                    descriptor.extras[key] = value

        return descriptor
