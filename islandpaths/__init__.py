"""Shortest routes between islands joined by weighted bridges: parsing, search and reporting."""

__version__ = "0.1.0"
__all__ = ["cli", "graph", "heap", "parser", "paths", "textutil"]