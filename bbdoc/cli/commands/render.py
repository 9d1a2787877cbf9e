"""Render command for the bbdoc CLI."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from bbdoc.errors import BBDocException
from bbdoc.models import Roster
from bbdoc.nodes import DeferredRef
from bbdoc.rendering.codecs import CodecDecoder
from bbdoc.rendering.loaders import FileSystemLoader
from bbdoc.rendering.options import RenderConfig
from bbdoc.rendering.renderer import MarkupRenderer

DEFAULT_RESOURCE = "data/taromaru-st.json"

console = Console(stderr=True)


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                markup=False,
                show_time=False,
                show_path=debug,
            )
        ],
        force=True,
    )


def render_document(resource: str, config: RenderConfig) -> str:
    """Resolve ``resource`` as a roster and return its markup."""
    renderer = MarkupRenderer(
        loader=FileSystemLoader.from_config(config),
        decoder=CodecDecoder(config),
        config=config,
    )
    return renderer.render(DeferredRef.to(Roster, resource))


def main(
    resource: str = typer.Argument(
        DEFAULT_RESOURCE, help="Root roster resource, relative to the base dir"
    ),
    base_dir: Optional[str] = typer.Option(
        None, "--base-dir", "-d", help="Directory resource names resolve against"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log each resource as it is loaded"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Render a roster document to BBCode."""
    _configure_logging(verbose, debug)
    config = RenderConfig.from_env(base_dir=base_dir)

    try:
        markup = render_document(resource, config)
    except BBDocException as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    typer.echo(f"{config.output_label}\n{markup}")
