from os import environ as env
from typing import Optional

from pydantic import BaseModel, HttpUrl, TypeAdapter, field_validator

from ._utils.constants import ENV_BASE_URL, ENV_DEBUG

_TRUTHY = {"1", "true", "yes", "on"}
_HTTP_URL = TypeAdapter(HttpUrl)


class Config(BaseModel):
    base_url: Optional[str] = None
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        # must be absolute, relative request URIs are resolved against it
        _HTTP_URL.validate_python(value)
        return value

    @classmethod
    def from_env(
        cls, *, base_url: Optional[str] = None, debug: Optional[bool] = None
    ) -> "Config":
        """Build a config from explicit values, falling back to the environment."""
        base_url_value = base_url or env.get(ENV_BASE_URL)
        debug_value = (
            debug
            if debug is not None
            else env.get(ENV_DEBUG, "").strip().lower() in _TRUTHY
        )
        return cls(base_url=base_url_value, debug=debug_value)
