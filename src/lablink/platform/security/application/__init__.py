"""Security application layer."""
