"""Rate limit core: records, windows, decisions and store contracts."""
