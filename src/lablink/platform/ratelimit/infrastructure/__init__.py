"""Rate limit infrastructure: SQL and Redis counter stores."""
