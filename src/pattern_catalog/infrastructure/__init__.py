"""Infrastructure layer - registry and logging."""
