#!/usr/bin/env python
"""Command line interface for bbdoc."""

import typer

from bbdoc.cli.commands import render

app = typer.Typer(help="Render styled document trees to BBCode")

app.command("render")(render.main)


@app.callback()
def callback():
    """Render styled document trees to BBCode markup."""
    pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
