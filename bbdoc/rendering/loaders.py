"""
Resource loaders for deferred references.

FileSystemLoader reads names relative to a base directory; InMemoryLoader
serves a fixed mapping and is handy for tests and embedding.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from ..errors import ResourceUnavailable
from .options import RenderConfig
from .renderer_iface import ResourceLoader

LOGGER = logging.getLogger(__name__)


@dataclass
class FileSystemLoader(ResourceLoader):
    base_dir: str = "."

    @classmethod
    def from_config(cls, config: Optional[RenderConfig] = None) -> "FileSystemLoader":
        return cls(base_dir=(config or RenderConfig()).base_dir)

    def resolve_path(self, resource_name: str) -> str:
        return os.path.join(self.base_dir, resource_name)

    def load(self, resource_name: str) -> bytes:
        path = self.resolve_path(resource_name)
        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except OSError as e:
            LOGGER.debug("bbdoc.loader.read_fail path=%s err=%s", path, e)
            raise ResourceUnavailable(resource_name, e.strerror or str(e)) from e
        LOGGER.debug("bbdoc.loader.read path=%s bytes=%d", path, len(data))
        return data


@dataclass
class InMemoryLoader(ResourceLoader):
    resources: Dict[str, bytes] = field(default_factory=dict)

    def add(self, resource_name: str, data: Union[str, bytes]) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.resources[resource_name] = data

    def load(self, resource_name: str) -> bytes:
        try:
            return self.resources[resource_name]
        except KeyError:
            raise ResourceUnavailable(resource_name, "no such resource") from None
