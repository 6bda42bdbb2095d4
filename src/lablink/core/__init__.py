"""Core building blocks shared by all lablink platforms."""
