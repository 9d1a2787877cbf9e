"""Render styled document trees to BBCode markup."""

from .errors import (
    BBDocException,
    DecodeError,
    EmptySequenceError,
    ResourceUnavailable,
    UnsupportedNodeError,
)
from .nodes import (
    DeferredRef,
    ImageRef,
    ItemList,
    ItemListSpaced,
    KeyValue,
    NumericValue,
    Spoiler,
    StyledText,
)
from .rendering.loaders import FileSystemLoader, InMemoryLoader
from .rendering.codecs import CodecDecoder
from .rendering.options import RenderConfig
from .rendering.renderer import MarkupRenderer, render
from .style import StyleSet

__all__ = [
    "BBDocException",
    "CodecDecoder",
    "DecodeError",
    "DeferredRef",
    "EmptySequenceError",
    "FileSystemLoader",
    "ImageRef",
    "InMemoryLoader",
    "ItemList",
    "ItemListSpaced",
    "KeyValue",
    "MarkupRenderer",
    "NumericValue",
    "RenderConfig",
    "ResourceUnavailable",
    "Spoiler",
    "StyleSet",
    "StyledText",
    "UnsupportedNodeError",
    "render",
]
