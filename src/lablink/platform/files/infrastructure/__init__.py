"""File platform infrastructure: storage adapters and repositories."""
