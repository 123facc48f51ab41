"""Main entry point for fretlab."""

from fretlab.cli.main import cli

if __name__ == "__main__":
    cli()
