"""Security core: alert entities and repository contract."""
