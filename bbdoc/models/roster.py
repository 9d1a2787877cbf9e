"""Enemy roster document schema.

A roster points at a list of enemy groups; each group is a separate resource
holding a list of enemies, and each enemy's description is its own resource:

    Roster.enemies -> Enemies (groups, blank-line separated)
        -> ItemList[Enemy]
            -> Enemy.description -> str
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, RootModel

from ..nodes import (
    DeferredRef,
    ImageRef,
    ItemList,
    ItemListSpaced,
    KeyValue,
    StyledText,
)
from ..style import StyleSet, bold, italic, size
from ._base import DocModel

TITLE_STYLE = StyleSet.combine(size(120), bold(), italic())
STAT_KEY_STYLE = bold()


class Enemy(DocModel):
    name: str
    image: str
    health: int = Field(ge=0)
    points: int = Field(ge=0)
    description: DeferredRef[str]

    def stats(self) -> ItemList[KeyValue]:
        return ItemList(
            [
                KeyValue.new("Health", self.health).style_key(STAT_KEY_STYLE),
                KeyValue.new("Points", self.points).style_key(STAT_KEY_STYLE),
            ]
        )

    def to_node(self) -> ItemListSpaced[Any]:
        return ItemListSpaced(
            [
                StyledText.new(self.name).styled(TITLE_STYLE),
                ImageRef(self.image),
                self.stats(),
                self.description,
            ]
        )


class Enemies(RootModel[ItemListSpaced[DeferredRef[ItemList[Enemy]]]]):
    """Enemy groups, each loaded from its own resource."""

    def to_node(self) -> ItemListSpaced[DeferredRef[ItemList[Enemy]]]:
        return self.root


class Roster(DocModel):
    enemies: DeferredRef[Enemies]

    def to_node(self) -> DeferredRef[Enemies]:
        return self.enemies
