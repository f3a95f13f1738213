from typing import Any, Optional, Protocol, runtime_checkable

from httpx import AsyncClient, Response

from ._utils._request_descriptor import RequestDescriptor

_SEND_KWARGS = frozenset({"auth", "follow_redirects", "stream"})


@runtime_checkable
class Transport(Protocol):
    """Sends a built request and returns the response.

    Connection handling, timeouts, redirects and TLS are the transport's
    business; failures are raised as exceptions.
    """

    async def __call__(self, uri: str, descriptor: RequestDescriptor) -> Response: ...


class HttpxTransport:
    """Default transport, backed by :class:`httpx.AsyncClient`.

    ``descriptor.extras`` entries are forwarded to the client: ``auth``,
    ``follow_redirects`` and ``stream`` to ``send``, everything else (``params``,
    ``cookies``, ``timeout``, ``extensions``) to ``build_request``.
    """

    def __init__(
        self,
        client: Optional[AsyncClient] = None,
        *,
        base_url: Optional[str] = None,
    ) -> None:
        if client is None:
            client_kwargs: dict[str, Any] = {}
            if base_url:
                client_kwargs["base_url"] = base_url
            client = AsyncClient(**client_kwargs)
        self._client = client

    @property
    def client(self) -> AsyncClient:
        return self._client

    async def __call__(self, uri: str, descriptor: RequestDescriptor) -> Response:
        build_kwargs = {
            k: v for k, v in descriptor.extras.items() if k not in _SEND_KWARGS
        }
        send_kwargs = {k: v for k, v in descriptor.extras.items() if k in _SEND_KWARGS}

        request = self._client.build_request(
            descriptor.method.upper(),
            uri,
            headers=descriptor.headers,
            content=descriptor.body,
            **build_kwargs,
        )
        return await self._client.send(request, **send_kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()
