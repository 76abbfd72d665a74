"""A small interactive shell with built-in file and text commands."""

__version__ = "0.1.0"

__all__ = ["__version__"]