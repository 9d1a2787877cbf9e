"""
Render configuration.

Centralizes behavior flags so callers can tune defaults without touching
core logic. `RenderConfig.from_env` layers environment overrides on top of
the module defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RenderConfig:
    # Directory resource names are resolved against
    base_dir: str = "."

    # Text encoding for plain-text resources
    encoding: str = "utf-8"

    # Codec used when a resource name has no recognized suffix
    default_codec: str = "json"

    # Leading line written by the CLI before the markup
    output_label: str = "BBCode:"

    @classmethod
    def from_env(cls, base_dir: Optional[str] = None) -> "RenderConfig":
        """Build a config from BBDOC_* environment variables.

        An explicit ``base_dir`` argument wins over BBDOC_BASE_DIR.
        """
        defaults = cls()
        return cls(
            base_dir=base_dir or os.getenv("BBDOC_BASE_DIR") or defaults.base_dir,
            encoding=os.getenv("BBDOC_ENCODING") or defaults.encoding,
            default_codec=(
                os.getenv("BBDOC_DEFAULT_CODEC") or defaults.default_codec
            )
            .strip()
            .lower(),
        )
