"""Rate limit application layer."""
