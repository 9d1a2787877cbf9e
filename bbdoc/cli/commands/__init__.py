"""Command modules for the bbdoc CLI."""

from bbdoc.cli.commands import render

__all__ = ["render"]
