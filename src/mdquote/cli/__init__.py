"""Command line interface for mdquote."""
