"""File platform application layer."""
