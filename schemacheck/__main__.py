"""Entry point for ``python -m schemacheck``."""

from schemacheck.cli import cli

if __name__ == "__main__":
    cli()
