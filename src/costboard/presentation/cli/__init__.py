"""Command-line interface for Costboard."""
