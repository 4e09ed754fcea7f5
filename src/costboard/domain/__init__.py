"""Domain layer: billing repository interface and domain exceptions."""
