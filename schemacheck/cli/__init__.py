"""Command-line interface for schemacheck."""

from .cli import cli

__all__ = ["cli"]
