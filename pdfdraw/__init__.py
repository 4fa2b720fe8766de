"""Extract path-drawing commands from the Flate-compressed streams of PDF files."""

__version__ = "0.1.0"
__all__ = ["cli", "commands", "errors", "parser", "search"]