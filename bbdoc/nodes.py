"""
Document node kinds.

The set is closed: styled text, numeric value, key/value pair, the two list
variants, image reference, spoiler wrapper and deferred reference. Nodes are
immutable once built and carry no rendering logic; see
`bbdoc.rendering.renderer` for the markup each kind produces.

Every kind except KeyValue can also be decoded from structured data when used
as a pydantic field annotation:

  - StyledText / ImageRef / DeferredRef[T]: a string
  - NumericValue: a number
  - ItemList[T] / ItemListSpaced[T]: a non-empty array of T
  - Spoiler[T]: whatever T decodes from

Decoded text nodes start unstyled; styling is applied by the document schema.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Generic, Iterable, Iterator, List, Tuple, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import EmptySequenceError
from .style import StyleSet

T = TypeVar("T")


def format_number(value: Any) -> str:
    """Canonical decimal form: ``50.0`` -> ``50``, ``1e-05`` -> ``0.00001``.

    Never uses exponent notation. NaN prints as ``NaN``, infinities as
    ``inf`` and ``-inf``.
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if value.is_integer():
            return str(int(value))
        # shortest round-trip digits, laid out positionally
        return format(Decimal(repr(value)), "f")
    return str(value)


def _type_arg(source_type: Any) -> Any:
    args = get_args(source_type)
    return args[0] if args else Any


def _decodes_from(
    cls: type, build: Any, schema: core_schema.CoreSchema
) -> core_schema.CoreSchema:
    """Pass ``cls`` instances through; otherwise validate ``schema`` and build."""
    from_data = core_schema.no_info_after_validator_function(build, schema)
    return core_schema.json_or_python_schema(
        json_schema=from_data,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_data]
        ),
    )


@dataclass(frozen=True)
class StyledText:
    """A run of plain text plus the style applied to it at render time."""

    content: str
    style: StyleSet = field(default_factory=StyleSet)

    @classmethod
    def new(cls, value: Any) -> "StyledText":
        return cls(str(value))

    def styled(self, style: StyleSet) -> "StyledText":
        """Return a copy whose style is replaced by ``style``."""
        return replace(self, style=style)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _decodes_from(cls, cls.new, core_schema.str_schema())


@dataclass(frozen=True)
class NumericValue:
    value: float
    style: StyleSet = field(default_factory=StyleSet)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def styled(self, style: StyleSet) -> "NumericValue":
        return replace(self, style=style)

    def as_text(self) -> StyledText:
        return StyledText(format_number(self.value), self.style)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _decodes_from(cls, cls, core_schema.float_schema())


@dataclass(frozen=True)
class KeyValue:
    """Two independently styled halves rendered back to back.

    The separator is part of the text: the key carries a trailing ``:`` and the
    value a leading space, so styling a half never styles the other.
    """

    key: StyledText
    value: StyledText

    @classmethod
    def new(cls, key: Any, value: Any) -> "KeyValue":
        return cls(
            StyledText(f"{format_number(key)}:"),
            StyledText(f" {format_number(value)}"),
        )

    def style_key(self, style: StyleSet) -> "KeyValue":
        return replace(self, key=self.key.styled(style))

    def style_value(self, style: StyleSet) -> "KeyValue":
        return replace(self, value=self.value.styled(style))

    def style(self, key: StyleSet, value: StyleSet) -> "KeyValue":
        return self.style_key(key).style_value(value)


@dataclass(frozen=True)
class ImageRef:
    url: str

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _decodes_from(cls, cls, core_schema.str_schema())


class _FrozenNode:
    """Immutable base for the generic node kinds.

    Generic dataclasses lose their type arguments when pydantic builds a
    schema for them, so these are plain slotted classes.
    """

    __slots__: Tuple[str, ...] = ()
    _field_names: Tuple[str, ...] = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _fields(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._field_names)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))

    def __repr__(self) -> str:
        args = ", ".join(f"{n}={getattr(self, n)!r}" for n in self._field_names)
        return f"{type(self).__name__}({args})"


class ItemList(_FrozenNode, Generic[T]):
    """Ordered, non-empty sequence of nodes joined by single line breaks."""

    __slots__ = ("items",)
    _field_names = ("items",)
    separator = "\n"

    def __init__(self, items: Iterable[T]):
        frozen = tuple(items)
        if not frozen:
            raise EmptySequenceError(type(self).__name__)
        object.__setattr__(self, "items", frozen)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        item_type = _type_arg(source_type)
        return _decodes_from(cls, cls, handler.generate_schema(List[item_type]))


class ItemListSpaced(ItemList[T]):
    """Like ItemList, with a blank line between items."""

    __slots__ = ()
    separator = "\n\n"


class Spoiler(_FrozenNode, Generic[T]):
    __slots__ = ("inner",)
    _field_names = ("inner",)

    def __init__(self, inner: T):
        object.__setattr__(self, "inner", inner)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _decodes_from(cls, cls, handler.generate_schema(_type_arg(source_type)))


class DeferredRef(_FrozenNode, Generic[T]):
    """Stand-in for an external sub-document, resolved when rendered.

    ``target`` is the type the resource decodes to. Annotating a model field
    as ``DeferredRef[Enemies]`` fills it in from the type argument; code that
    builds references directly passes it explicitly (or uses `to`).
    """

    __slots__ = ("resource_name", "target")
    _field_names = ("resource_name", "target")

    def __init__(self, resource_name: str, target: Any = str):
        object.__setattr__(self, "resource_name", resource_name)
        object.__setattr__(self, "target", target)

    @classmethod
    def to(cls, target: Any, resource_name: str) -> "DeferredRef[Any]":
        return cls(resource_name, target)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        if not get_args(source_type):
            raise TypeError(
                "DeferredRef annotations need a decode target, e.g. DeferredRef[str]"
            )
        target = _type_arg(source_type)
        return _decodes_from(
            cls, lambda name: cls(name, target), core_schema.str_schema()
        )


__all__ = [
    "DeferredRef",
    "ImageRef",
    "ItemList",
    "ItemListSpaced",
    "KeyValue",
    "NumericValue",
    "Spoiler",
    "StyledText",
    "format_number",
]
