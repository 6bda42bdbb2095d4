"""Order application layer."""
