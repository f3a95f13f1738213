from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator

_request_id: ContextVar[str] = ContextVar("simple_client_request_id", default="")


def current_request_id() -> str:
    """Return the correlation id bound to the current context, or ``""``."""
    return _request_id.get()


@contextmanager
def request_id_scope(request_id: str) -> Generator[None, None, None]:
    """Bind ``request_id`` to every call made inside the ``with`` block.

    Example:
        ```python
        with request_id_scope("7f0c"):
            await client.get("/items", JsonOptions())
        ```
    """
    token = _request_id.set(request_id)
    try:
        yield
    finally:
        _request_id.reset(token)
