import json
from typing import Any, Callable, Literal, Optional, TypeVar, Union, overload

from dotenv import find_dotenv, load_dotenv
from httpx import URL, Response
from opentelemetry import trace

from ._config import Config
from ._json_converter import JsonConverter, PydanticJsonConverter
from ._request_builder import RequestBuilder
from ._transport import HttpxTransport, Transport
from ._utils._logs import Logger, default_logger_factory, setup_logging
from ._utils._request_descriptor import RequestDescriptor
from ._utils._request_id import current_request_id
from ._utils.constants import DEFAULT_EXPECTED_STATUS
from .models.errors import SimpleClientError
from .models.options import JsonOptions, RequestOptions, ResponseOptions

T = TypeVar("T")

Method = Literal["get", "post", "put", "patch", "delete"]

tracer = trace.get_tracer(__name__)


class SimpleClient:
    """Small async HTTP helper for JSON APIs.

    Every call builds its headers and body from the given options, sends the
    request through the transport and checks the response status. Calls made
    with :class:`ResponseOptions` return the :class:`httpx.Response` as is,
    calls made with :class:`JsonOptions` return the decoded (and optionally
    typed) JSON body.

    Args:
        transport: Sends the requests. Defaults to an :class:`HttpxTransport`
            owned, and closed, by the client.
        json_converter: Serializer used for JSON payloads and typed results.
        logger: Factory returning a logger for a scope name and its owner.
        request_id: Returns the correlation id put in the ``request-id``
            header, or ``""`` for none.
        base_url: Base URL of the default transport. Read from
            ``SIMPLE_CLIENT_BASE_URL`` when not given.
        debug: Enables debug logging. Read from ``SIMPLE_CLIENT_DEBUG`` when
            not given.

    Examples:
        ```python
        async with SimpleClient(base_url="https://api.example.com") as client:
            item = await client.post(
                "/items",
                JsonOptions(json={"name": "a"}, expected_status=201, token="Bearer x"),
            )
        ```
    """

    def __init__(
        self,
        *,
        transport: Optional[Transport] = None,
        json_converter: Optional[JsonConverter] = None,
        logger: Optional[Callable[[str, object], Logger]] = None,
        request_id: Optional[Callable[[], str]] = None,
        base_url: Optional[str] = None,
        debug: Optional[bool] = None,
    ) -> None:
        load_dotenv(find_dotenv(usecwd=True))
        self._config = Config.from_env(base_url=base_url, debug=debug)
        setup_logging(self._config.debug)

        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(
            base_url=self._config.base_url
        )
        self._json_converter = json_converter or PydanticJsonConverter()
        self._logger = logger or default_logger_factory
        self._builder = RequestBuilder(
            self._json_converter,
            request_id or current_request_id,
            self._logger,
            owner=self,
        )

    @property
    def config(self) -> Config:
        return self._config

    async def __aenter__(self) -> "SimpleClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    def build_request(self, method: str, options: RequestOptions) -> RequestDescriptor:
        return self._builder.build(method, options)

    @overload
    async def get(self, uri: Union[URL, str], options: ResponseOptions) -> Response: ...
    @overload
    async def get(self, uri: Union[URL, str], options: JsonOptions[T]) -> T: ...
    async def get(self, uri: Union[URL, str], options: RequestOptions) -> Any:
        return await self.http(uri, "get", options)

    @overload
    async def post(self, uri: Union[URL, str], options: ResponseOptions) -> Response: ...
    @overload
    async def post(self, uri: Union[URL, str], options: JsonOptions[T]) -> T: ...
    async def post(self, uri: Union[URL, str], options: RequestOptions) -> Any:
        return await self.http(uri, "post", options)

    @overload
    async def put(self, uri: Union[URL, str], options: ResponseOptions) -> Response: ...
    @overload
    async def put(self, uri: Union[URL, str], options: JsonOptions[T]) -> T: ...
    async def put(self, uri: Union[URL, str], options: RequestOptions) -> Any:
        return await self.http(uri, "put", options)

    @overload
    async def patch(self, uri: Union[URL, str], options: ResponseOptions) -> Response: ...
    @overload
    async def patch(self, uri: Union[URL, str], options: JsonOptions[T]) -> T: ...
    async def patch(self, uri: Union[URL, str], options: RequestOptions) -> Any:
        return await self.http(uri, "patch", options)

    @overload
    async def delete(
        self, uri: Union[URL, str], options: ResponseOptions
    ) -> Response: ...
    @overload
    async def delete(self, uri: Union[URL, str], options: JsonOptions[T]) -> T: ...
    async def delete(self, uri: Union[URL, str], options: RequestOptions) -> Any:
        return await self.http(uri, "delete", options)

    @overload
    async def http(
        self, uri: Union[URL, str], method: Method, options: ResponseOptions
    ) -> Response: ...
    @overload
    async def http(
        self, uri: Union[URL, str], method: Method, options: JsonOptions[T]
    ) -> T: ...
    async def http(
        self, uri: Union[URL, str], method: Method, options: RequestOptions
    ) -> Any:
        """Send one request and validate its response.

        Args:
            uri: Absolute URL, or a path relative to the transport base URL.
            method: HTTP method, lower case.
            options: :class:`ResponseOptions` or :class:`JsonOptions`.

        Returns:
            The :class:`httpx.Response` for ``ResponseOptions``; the decoded
            JSON body, mapped by ``deserializer`` or validated into
            ``deserialize_type`` when set, for ``JsonOptions``.

        Raises:
            SimpleClientError: If the transport fails or the response status
                is not ``options.expected_status`` (200 by default).
            json.JSONDecodeError: If a JSON response body cannot be decoded.
            pydantic.ValidationError: If the body does not match
                ``deserialize_type``.
        """
        logger = self._logger("http", self)

        descriptor = self._builder.build(method, options)

        with tracer.start_as_current_span("simple_client.http") as span:
            span.set_attribute("http.method", descriptor.method.upper())
            span.set_attribute("http.url", str(uri))

            try:
                response = await self._transport(str(uri), descriptor)
            except Exception as e:
                msg = f"fail to execute request : {e}"
                logger.error(msg)
                raise SimpleClientError(msg, e) from e

            span.set_attribute("http.status_code", response.status_code)

            expected_status = options.expected_status or DEFAULT_EXPECTED_STATUS
            if response.status_code != expected_status:
                msg = (
                    f"expecting status <{expected_status}> calling <{uri}>, "
                    f"got <{response.status_code}>"
                )
                logger.error(msg)
                await response.aread()
                await response.aclose()
                text = response.text
                response_body: Any = text
                try:
                    response_body = json.loads(text)
                except ValueError:
                    logger.debug("cannot deserialize body")
                logger.debug("got body %s", response_body)
                raise SimpleClientError(
                    msg,
                    response_status=response.status_code,
                    response_body=response_body,
                )

            if options.mode == "json":
                return await self._decode(response, options, logger)

            return response

    async def _decode(
        self, response: Response, options: JsonOptions[Any], logger: Logger
    ) -> Any:
        await response.aread()
        try:
            data = response.json()
            if options.deserializer is not None:
                return options.deserializer(data)
            if options.deserialize_type is not None:
                return self._json_converter.deserialize(data, options.deserialize_type)
            return data
        except Exception as e:
            logger.error(f"fail to deserialize response body : {e}")
            raise
