"""Bigraph terms, reaction rules, canonical term strings and property queries."""

__version__ = "0.1.0"
__all__ = ["__version__"]