"""Infrastructure layer: adapters for persistence and logging."""
