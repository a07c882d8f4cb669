"""Typed document metadata extraction from loosely-typed parser output."""

__version__ = "0.1.0"
