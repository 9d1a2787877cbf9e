"""Command line interface for bbdoc."""
