from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python


@runtime_checkable
class JsonConverter(Protocol):
    """Maps Python values to JSON compatible data and back."""

    def serialize(
        self, value: Any, type_hint: Optional[Any] = None, *, unsafe: bool = False
    ) -> Any: ...

    def deserialize(self, data: Any, target_type: Any) -> Any: ...


class PydanticJsonConverter:
    """JSON converter backed by pydantic.

    Values are dumped in pydantic's ``json`` mode: models become dicts,
    datetimes ISO strings, enums their values. With ``unsafe`` set, values
    pydantic does not know how to serialize fall back to ``str()`` instead of
    raising.
    """

    def serialize(
        self, value: Any, type_hint: Optional[Any] = None, *, unsafe: bool = False
    ) -> Any:
        if type_hint is None:
            return to_jsonable_python(value, serialize_unknown=unsafe)
        return TypeAdapter(type_hint).dump_python(
            value, mode="json", warnings=not unsafe
        )

    def deserialize(self, data: Any, target_type: Any) -> Any:
        return TypeAdapter(target_type).validate_python(data)
