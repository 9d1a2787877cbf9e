"""Example: build a document in code and render it with in-memory resources."""

import argparse
import logging

from rich.console import Console

from bbdoc import (
    DeferredRef,
    ImageRef,
    InMemoryLoader,
    ItemList,
    ItemListSpaced,
    KeyValue,
    MarkupRenderer,
    NumericValue,
    Spoiler,
    StyledText,
    StyleSet,
)
from bbdoc.style import bold, color, italic, size

console = Console()


def build_loader() -> InMemoryLoader:
    loader = InMemoryLoader()
    loader.add("lore.txt", "Sleeps under the old bridge.")
    loader.add("drops.yaml", "- Cucumber\n- River stone\n")
    return loader


def build_document() -> ItemListSpaced:
    title = StyledText("Kappa").styled(StyleSet.combine(size(120), bold(), italic()))
    stats = ItemList(
        [
            KeyValue.new("Health", 50).style_key(bold()),
            KeyValue.new("Speed", 1.5).style(bold(), color("green")),
        ]
    )
    return ItemListSpaced(
        [
            title,
            ImageRef("https://example.com/kappa.png"),
            stats,
            NumericValue(42, italic()),
            DeferredRef("lore.txt", str),
            Spoiler(DeferredRef.to(ItemList[StyledText], "drops.yaml")),
        ]
    )


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description="Inline document example.")
    parser.add_argument("--verbose", action="store_true", help="Log resource loads.")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    markup = MarkupRenderer(loader=build_loader()).render(build_document())
    console.rule("BBCode")
    console.print(markup, markup=False, highlight=False)


if __name__ == "__main__":
    main()
