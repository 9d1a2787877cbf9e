from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DocModel(BaseModel):
    """
    Base for schema objects decoded from resources.

    Unknown keys fail the decode, so a misspelled field surfaces as a
    DecodeError for the resource instead of silently dropping data. Instances
    are frozen like the node kinds they build.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)


__all__ = ["DocModel"]
