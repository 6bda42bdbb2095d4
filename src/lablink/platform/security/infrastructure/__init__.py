"""Security infrastructure."""
