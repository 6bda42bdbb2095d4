"""LabLink platforms: files, rate limiting, orders and security alerts."""
