"""Infrastructure layer: fixture-backed repository and HTTP client."""
