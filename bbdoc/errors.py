"""Library exceptions."""

from __future__ import annotations

from typing import Any, Optional


class BBDocException(Exception):
    """Generic bbdoc exception."""

    kind = "BBDocException"

    def __str__(self) -> str:
        return f"{self.kind}: {super().__str__()}"


class ResourceUnavailable(BBDocException):
    """A deferred resource could not be located or read."""

    kind = "ResourceUnavailable"

    def __init__(self, resource_name: str, reason: Optional[str] = None):
        self.resource_name = resource_name
        self.reason = reason
        message = f"cannot load resource '{resource_name}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DecodeError(BBDocException):
    """Loaded bytes do not match the shape expected by the decode target."""

    kind = "DecodeError"

    def __init__(self, resource_name: str, target: Any, reason: Optional[str] = None):
        self.resource_name = resource_name
        self.target = target
        self.reason = reason
        name = getattr(target, "__name__", None) or repr(target)
        message = f"resource '{resource_name}' does not decode as {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptySequenceError(BBDocException, ValueError):
    """A list node was built without any children."""

    kind = "EmptySequence"

    def __init__(self, node_kind: str):
        self.node_kind = node_kind
        super().__init__(f"{node_kind} requires at least one item")


class UnsupportedNodeError(BBDocException, TypeError):
    """Value handed to the renderer is not a document node."""

    kind = "UnsupportedNode"

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"cannot render {type(node).__name__!s}")
