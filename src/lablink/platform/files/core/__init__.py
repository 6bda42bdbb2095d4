"""File platform core: entities, value objects and protocols."""
