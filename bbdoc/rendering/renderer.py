"""
BBCode renderer for document nodes.

Walks a node tree depth first, left to right, and folds child renderings into
the parent's markup. DeferredRef nodes are loaded and decoded in line through
the injected ResourceLoader/StructuredDecoder and the decoded value is rendered
in their place; a reference contributes no tags of its own.

Tag nesting for styled text is fixed, innermost to outermost:

    [i][b][size=n][color=c]content[/color][/size][/b][/i]

Rendering is all-or-nothing: any failure propagates and no partial markup is
returned.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Type

from ..errors import DecodeError, ResourceUnavailable, UnsupportedNodeError
from ..nodes import (
    DeferredRef,
    ImageRef,
    ItemList,
    ItemListSpaced,
    KeyValue,
    NumericValue,
    Spoiler,
    StyledText,
)
from .codecs import CodecDecoder
from .options import RenderConfig
from .renderer_iface import DocumentNode, ResourceLoader, StructuredDecoder

LOGGER = logging.getLogger(__name__)


def wrap_tag(tag: str, inner: str, value: Optional[Any] = None) -> str:
    opening = f"[{tag}={value}]" if value is not None else f"[{tag}]"
    return f"{opening}{inner}[/{tag}]"


def render_styled_text(node: StyledText) -> str:
    text = node.content
    style = node.style
    if style.color is not None:
        text = wrap_tag("color", text, style.color)
    if style.size is not None:
        text = wrap_tag("size", text, style.size)
    if style.bold:
        text = wrap_tag("b", text)
    if style.italic:
        text = wrap_tag("i", text)
    return text


class _MissingLoader:
    def load(self, resource_name: str) -> bytes:
        raise ResourceUnavailable(resource_name, "no resource loader configured")


class MarkupRenderer:
    """Class-based interface for node rendering."""

    def __init__(
        self,
        loader: Optional[ResourceLoader] = None,
        decoder: Optional[StructuredDecoder] = None,
        config: Optional[RenderConfig] = None,
    ):
        self.config = config or RenderConfig()
        self.loader: ResourceLoader = loader or _MissingLoader()
        self.decoder: StructuredDecoder = decoder or CodecDecoder(self.config)
        self._depth = 0
        self._dispatch: Dict[Type[Any], Callable[[Any], str]] = {
            str: self._render_str,
            StyledText: render_styled_text,
            NumericValue: self._render_numeric,
            KeyValue: self._render_key_value,
            ItemList: self._render_list,
            ItemListSpaced: self._render_list,
            ImageRef: self._render_image,
            Spoiler: self._render_spoiler,
            DeferredRef: self._render_deferred,
        }

    def render(self, node: Any) -> str:
        """Render ``node`` (recursively) to a markup string."""
        handler = self._dispatch.get(type(node))
        if handler is not None:
            return handler(node)
        if isinstance(node, DocumentNode):
            return self.render(node.to_node())
        raise UnsupportedNodeError(node)

    def can_render(self, node: Any) -> bool:
        return type(node) in self._dispatch or isinstance(node, DocumentNode)

    def _render_str(self, node: str) -> str:
        return node

    def _render_numeric(self, node: NumericValue) -> str:
        return render_styled_text(node.as_text())

    def _render_key_value(self, node: KeyValue) -> str:
        return render_styled_text(node.key) + render_styled_text(node.value)

    def _render_list(self, node: ItemList[Any]) -> str:
        return node.separator.join(self.render(item) for item in node.items)

    def _render_image(self, node: ImageRef) -> str:
        return wrap_tag("img", node.url)

    def _render_spoiler(self, node: Spoiler[Any]) -> str:
        return wrap_tag("spoiler", self.render(node.inner))

    def _render_deferred(self, node: DeferredRef[Any]) -> str:
        name = node.resource_name
        LOGGER.info("Loading %s", name)
        LOGGER.debug(
            "bbdoc.render.deferred name=%s depth=%d target=%s",
            name,
            self._depth,
            getattr(node.target, "__name__", node.target),
        )
        data = self.loader.load(name)
        value = self.decoder.decode(name, data, node.target)
        if not self.can_render(value):
            raise DecodeError(
                name,
                node.target,
                f"decoded {type(value).__name__} is not a document node",
            )
        self._depth += 1
        try:
            return self.render(value)
        finally:
            self._depth -= 1


def render(
    node: Any,
    loader: Optional[ResourceLoader] = None,
    decoder: Optional[StructuredDecoder] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    return MarkupRenderer(loader, decoder, config=config).render(node)
