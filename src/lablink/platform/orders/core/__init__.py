"""Order core: drafts, created orders and repository contract."""
