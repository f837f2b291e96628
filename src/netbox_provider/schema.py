"""Field declarations and the state container handed to resource handlers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    STRING = "string"
    INT = "int"

    @property
    def zero_value(self) -> Any:
        return "" if self is FieldType.STRING else 0

    def coerce(self, value: Any) -> Any:
        if value is None:
            return self.zero_value
        if self is FieldType.STRING:
            return str(value)
        if isinstance(value, bool):
            raise ValueError(f"Expected an integer, got {value!r}")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"Expected a whole number, got {value!r}")
        return int(value)


@dataclass(frozen=True)
class SchemaField:
    type: FieldType
    required: bool = False
    optional: bool = False
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "required": self.required,
            "optional": self.optional,
            "description": self.description,
        }


class InvalidResourceIdError(ValueError):
    """The local resource ID is not a NetBox integer ID."""


class ResourceData:
    """
    Mutable view over one resource instance's state.

    The host owns the instance between calls. Handlers read declared fields
    with ``get``, write remote values back with ``set`` and mark the resource
    as existing (or gone) with ``set_id``. An empty ID means the resource does
    not exist.
    """

    def __init__(
        self,
        schema: dict[str, SchemaField],
        id: str = "",
        attributes: dict[str, Any] | None = None,
    ):
        self.schema = schema
        self._id = ""
        self._attributes: dict[str, Any] = {}
        self.set_id(id)
        for key, value in (attributes or {}).items():
            self.set(key, value)

    @classmethod
    def from_state(cls, schema: dict[str, SchemaField], state: dict[str, Any]) -> "ResourceData":
        """Build a container from a host state dict (``{"id": ..., **attributes}``)."""
        attributes = {k: v for k, v in state.items() if k != "id"}
        unknown = sorted(set(attributes) - set(schema))
        if unknown:
            raise ValueError(
                f"Unknown attributes: {', '.join(unknown)}. Valid attributes: {', '.join(schema)}"
            )
        return cls(schema, id=state.get("id") or "", attributes=attributes)

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: Any) -> None:
        self._id = "" if value is None else str(value)

    def int_id(self) -> int:
        """Return the ID as the integer NetBox knows the object by."""
        try:
            return int(self._id)
        except ValueError:
            raise InvalidResourceIdError(f"Invalid resource ID {self._id!r}: expected an integer") from None

    def _field(self, key: str) -> SchemaField:
        if key not in self.schema:
            raise KeyError(f"Unknown attribute {key!r}")
        return self.schema[key]

    def get(self, key: str) -> Any:
        field = self._field(key)
        return self._attributes.get(key, field.type.zero_value)

    def set(self, key: str, value: Any) -> None:
        field = self._field(key)
        self._attributes[key] = field.type.coerce(value)

    def validate_required(self) -> None:
        """Raise ValueError naming every required attribute that was never set."""
        missing = sorted(
            key for key, field in self.schema.items() if field.required and key not in self._attributes
        )
        if missing:
            raise ValueError(f"Missing required attributes: {', '.join(missing)}")

    def state(self) -> dict[str, Any]:
        state: dict[str, Any] = {"id": self._id}
        for key, field in self.schema.items():
            state[key] = self._attributes.get(key, field.type.zero_value)
        return state

    def __repr__(self) -> str:
        return f"ResourceData({self.state()!r})"
