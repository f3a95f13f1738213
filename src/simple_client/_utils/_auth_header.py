import re
from typing import Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# RFC 7230 tchar
_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
# RFC 7235 token68
_TOKEN68_RE = re.compile(r"^[A-Za-z0-9\-._~+/]+=*$")


class AuthToken(BaseModel):
    """Credentials to put in an ``Authorization`` header.

    Either ``token`` (a token68 value such as a bearer token) or ``params``
    (a list of auth-params) may follow the scheme, not both.
    """

    model_config = ConfigDict(frozen=True)

    scheme: str
    token: Optional[str] = None
    params: Mapping[str, str] = Field(default_factory=dict)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_param(name: str, value: str) -> str:
    if not _TOKEN_RE.match(name):
        raise ValueError(f"Invalid auth-param name: {name!r}")
    if _TOKEN_RE.match(value):
        return f"{name}={value}"
    return f"{name}={_quote(value)}"


def format_authorization(token: Union[AuthToken, Mapping[str, object]]) -> str:
    """Format credentials following the RFC 7235 header grammar.

    Args:
        token: An :class:`AuthToken` or a mapping with the same keys.

    Returns:
        str: The header value, e.g. ``Bearer abc`` or ``Digest realm="a b", nc=1``.

    Raises:
        ValueError: If the scheme or a parameter name is not a valid token, or
            both a token68 and parameters are given.
    """
    if not isinstance(token, AuthToken):
        token = AuthToken.model_validate(token)

    if not _TOKEN_RE.match(token.scheme):
        raise ValueError(f"Invalid auth scheme: {token.scheme!r}")

    if token.token and token.params:
        raise ValueError("An auth token cannot carry both a token68 and params")

    if token.token:
        if not _TOKEN68_RE.match(token.token):
            raise ValueError("Invalid token68 value")
        return f"{token.scheme} {token.token}"

    if token.params:
        params = ", ".join(
            _format_param(name, value) for name, value in token.params.items()
        )
        return f"{token.scheme} {params}"

    return token.scheme
