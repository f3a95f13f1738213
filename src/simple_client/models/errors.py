from typing import Any, Optional


class SimpleClientError(Exception):
    """Error raised by :class:`~simple_client.SimpleClient` calls.

    The underlying error of a failed transport call is chained through the
    native ``__cause__`` and is also reachable as :attr:`cause`.
    ``response_status`` and ``response_body`` are only set when the response
    status did not match the expected one.

    Attributes:
        message: Human readable description of the failure.
        response_status: Status code of the unexpected response.
        response_body: Body of the unexpected response, parsed as JSON when
            possible, raw text otherwise.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        response_status: Optional[int] = None,
        response_body: Any = None,
    ) -> None:
        self.message = message
        self.response_status = response_status
        self.response_body = response_body
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__
