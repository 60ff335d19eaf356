# filebundler/__init__.py
"""Concatenate source files from a directory tree into a single bundle file."""

__version__ = "0.1.0"
