"""Version information for lablink."""

__version__ = "0.3.0"
