"""JSON value model: one dataclass per JSON variant."""

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple
from ..types import ValueKind


@dataclass
class JsonValue:
    """
    Base class of the JSON value tagged union.

    Every node exclusively owns its children, so a parsed document is a
    plain tree. Dataclass equality makes two trees equal when they have
    the same shape, the same order and the same leaf values.
    """

    kind: ClassVar[ValueKind]

    def to_python(self) -> Any:
        """Convert this node and its subtree to native Python data."""
        raise NotImplementedError

    def is_container(self) -> bool:
        return self.kind in (ValueKind.ARRAY, ValueKind.OBJECT)


@dataclass
class JsonNull(JsonValue):
    kind: ClassVar[ValueKind] = ValueKind.NULL

    def to_python(self) -> None:
        return None


@dataclass
class JsonBool(JsonValue):
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"JsonBool value must be bool, got {type(self.value).__name__}")

    def to_python(self) -> bool:
        return self.value


@dataclass
class JsonNumber(JsonValue):
    """Number node; always stored as a double-precision float."""

    value: float
    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"JsonNumber value must be a number, got {type(self.value).__name__}")
        self.value = float(self.value)
        if not math.isfinite(self.value):
            raise ValueError("JsonNumber value must be finite")

    def to_python(self) -> float:
        return self.value


@dataclass
class JsonString(JsonValue):
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"JsonString value must be str, got {type(self.value).__name__}")

    def to_python(self) -> str:
        return self.value


@dataclass
class JsonArray(JsonValue):
    """Ordered sequence of values."""

    items: List[JsonValue] = field(default_factory=list)
    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> JsonValue:
        return self.items[index]

    def to_python(self) -> List[Any]:
        return [item.to_python() for item in self.items]


@dataclass
class JsonObject(JsonValue):
    """
    Ordered sequence of key/value members.

    Members keep their insertion order; keys must be unique.
    """

    members: List[Tuple[str, JsonValue]] = field(default_factory=list)
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Validate key types and uniqueness."""
        seen = set()
        for key, _ in self.members:
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, got {type(key).__name__}")
            if key in seen:
                raise ValueError(f"duplicate object key: {key!r}")
            seen.add(key)

    def __len__(self) -> int:
        return len(self.members)

    def keys(self) -> List[str]:
        return [key for key, _ in self.members]

    def get(self, key: str, default: Optional[JsonValue] = None) -> Optional[JsonValue]:
        for member_key, value in self.members:
            if member_key == key:
                return value
        return default

    def to_python(self) -> Dict[str, Any]:
        return {key: value.to_python() for key, value in self.members}


def from_python(data: Any) -> JsonValue:
    """
    Build a value tree from native Python data.

    Args:
        data: None, bool, int, float, str, list/tuple or dict with str keys

    Returns:
        Root JsonValue of the new tree

    Raises:
        TypeError: If data contains an unsupported type or a non-str key
        ValueError: If data contains a non-finite float
    """
    if data is None:
        return JsonNull()
    if isinstance(data, bool):
        return JsonBool(data)
    if isinstance(data, (int, float)):
        return JsonNumber(data)
    if isinstance(data, str):
        return JsonString(data)
    if isinstance(data, (list, tuple)):
        return JsonArray([from_python(item) for item in data])
    if isinstance(data, dict):
        return JsonObject([(key, from_python(value)) for key, value in data.items()])
    raise TypeError(f"Cannot convert {type(data).__name__} to a JSON value")
