from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Generic,
    Literal,
    Mapping,
    Optional,
    Protocol,
    TypeVar,
    Union,
    runtime_checkable,
)

from .._utils._auth_header import AuthToken

T = TypeVar("T")

Converter = Callable[[Any], Any]


@runtime_checkable
class AuthenticatedUser(Protocol):
    """Caller identity used to authorize requests.

    ``get_token`` returns the credentials to format into the ``Authorization``
    header, or a falsy value when the user has none. A plain string is used as
    an already formatted header value.
    ``get_client_headers`` returns extra headers sent with every request of
    this user; they never override the headers the client sets itself.
    """

    def get_token(self) -> Union[AuthToken, Mapping[str, Any], str, None]: ...

    def get_client_headers(self) -> Optional[Mapping[str, str]]: ...


@dataclass(frozen=True, kw_only=True)
class ClientOptions:
    user: Optional[AuthenticatedUser] = None
    token: Optional[str] = None
    fetch_options: Optional[Mapping[str, Any]] = None
    expected_status: Optional[int] = None
    form: Optional[Mapping[str, str]] = None


@dataclass(frozen=True, kw_only=True)
class ResponseOptions(ClientOptions):
    """Options for calls returning the raw :class:`httpx.Response`."""

    mode: Literal["response"] = field(default="response", init=False)


@dataclass(frozen=True, kw_only=True)
class JsonOptions(ClientOptions, Generic[T]):
    """Options for calls sending and returning JSON.

    Attributes:
        json: Payload to send. Nothing is sent when ``None``.
        serializer: ``False`` sends ``json`` as is, a callable maps it before
            encoding, ``None`` runs it through the client's JSON converter.
        deserializer: Maps the decoded response body to the result.
        deserialize_type: Type the JSON converter validates the decoded
            response body into. Ignored when ``deserializer`` is set.
    """

    mode: Literal["json"] = field(default="json", init=False)
    json: Any = None
    serializer: Union[Literal[False], Converter, None] = None
    deserializer: Optional[Callable[[Any], T]] = None
    deserialize_type: Optional[Any] = None


RequestOptions = Union[ResponseOptions, JsonOptions[Any]]
