"""Presentation layer: REST API, web frontend serving and terminal dashboard."""
