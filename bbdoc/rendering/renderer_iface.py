"""
Collaborator seams for the markup renderer.

Defines the two external capabilities a DeferredRef needs at render time:
  - ResourceLoader: resource name -> raw bytes
  - StructuredDecoder: raw bytes -> value of the reference's target type

plus the DocumentNode protocol that lets schema objects render through the
primitive nodes they compose.

The renderer performs no I/O itself; it only calls these interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class ResourceLoader(Protocol):
    """Raises ResourceUnavailable when ``resource_name`` cannot be read."""

    def load(self, resource_name: str) -> bytes: ...


class StructuredDecoder(Protocol):
    """Raises DecodeError when ``data`` does not match ``target``."""

    def decode(self, resource_name: str, data: bytes, target: Any) -> Any: ...


@runtime_checkable
class DocumentNode(Protocol):
    """Schema object that renders as the node tree it builds."""

    def to_node(self) -> Any: ...
