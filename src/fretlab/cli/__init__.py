"""Command-line interface for fretlab."""
