"""Order infrastructure."""
