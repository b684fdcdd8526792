"""howto: turn a plain-language action into a single shell command."""

__version__ = "0.1.0"
