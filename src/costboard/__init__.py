"""Costboard - read-only AWS cost dashboard."""

__version__ = "0.1.0"
