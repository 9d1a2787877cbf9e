"""
Suffix-based structured decoding for deferred resources.

A small dispatcher that maps a resource name's suffix to a codec, and lets
the target type's pydantic schema drive the actual decode:

  - .json        -> TypeAdapter.validate_json
  - .yaml / .yml -> yaml.safe_load, then TypeAdapter.validate_python
  - .txt         -> text decode minus one trailing line break, then
                    TypeAdapter.validate_python

Names without a recognized suffix use the configured default codec. Every
decode failure surfaces as DecodeError naming the resource.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, Optional, Protocol

import yaml
from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError
from .options import RenderConfig
from .renderer_iface import StructuredDecoder

LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def adapter_for(target: Any) -> TypeAdapter:
    try:
        return _adapter(target)
    except TypeError:
        # Unhashable type expressions cannot be cached
        return TypeAdapter(target)


class _Codec(Protocol):
    name: str

    def decode(self, data: bytes, adapter: TypeAdapter, encoding: str) -> Any: ...


class _JsonCodec:
    name = "json"

    def decode(self, data: bytes, adapter: TypeAdapter, encoding: str) -> Any:
        return adapter.validate_json(data)


class _YamlCodec:
    name = "yaml"

    def decode(self, data: bytes, adapter: TypeAdapter, encoding: str) -> Any:
        return adapter.validate_python(yaml.safe_load(data.decode(encoding)))


class _TextCodec:
    name = "text"

    def decode(self, data: bytes, adapter: TypeAdapter, encoding: str) -> Any:
        text = data.decode(encoding)
        # drop the final line break editors append
        if text.endswith("\r\n"):
            text = text[:-2]
        elif text.endswith("\n"):
            text = text[:-1]
        return adapter.validate_python(text)


_CODECS: Dict[str, _Codec] = {
    codec.name: codec for codec in (_JsonCodec(), _YamlCodec(), _TextCodec())
}

_SUFFIX_MAP: Dict[str, str] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".txt": "text",
}


@dataclass
class CodecDecoder(StructuredDecoder):
    config: RenderConfig = field(default_factory=RenderConfig)

    def codec_for(self, resource_name: str) -> _Codec:
        suffix = os.path.splitext(resource_name)[1].lower()
        codec_name = _SUFFIX_MAP.get(suffix, self.config.default_codec)
        codec = _CODECS.get(codec_name)
        if codec is None:
            raise DecodeError(
                resource_name, None, f"unknown codec {codec_name!r}"
            )
        return codec

    def decode(self, resource_name: str, data: bytes, target: Any) -> Any:
        codec = self.codec_for(resource_name)
        LOGGER.debug(
            "bbdoc.decoder.decode name=%s codec=%s target=%s",
            resource_name,
            codec.name,
            getattr(target, "__name__", target),
        )
        try:
            return codec.decode(data, adapter_for(target), self.config.encoding)
        except ValidationError as e:
            raise DecodeError(resource_name, target, _summarize(e)) from e
        except yaml.YAMLError as e:
            raise DecodeError(resource_name, target, f"invalid YAML: {e}") from e
        except UnicodeDecodeError as e:
            raise DecodeError(resource_name, target, f"invalid text: {e}") from e


def _summarize(err: ValidationError) -> Optional[str]:
    # Nodes decode through an "instance or data" union; the instance branch
    # error is noise for data loaded from a resource.
    errors = [e for e in err.errors() if e.get("type") != "is_instance_of"]
    errors = errors or err.errors()
    if not errors:
        return None
    first = errors[0]
    # Keep field names and indexes, drop schema tags like "function-after[...]"
    parts = [
        str(p)
        for p in first.get("loc", ())
        if isinstance(p, int) or str(p).isidentifier()
    ]
    loc = ".".join(parts) or "<root>"
    more = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{loc}: {first.get('msg')}{more}"
