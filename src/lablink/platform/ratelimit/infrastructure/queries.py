"""Rate limit SQL query constants.

Following maximum separation architecture - one file = one purpose.
"""

RATE_LIMIT_FIND_ACTIVE = """
    SELECT id, identifier, endpoint, window_start, request_count
    FROM rate_limits
    WHERE identifier = $1 AND endpoint = $2 AND window_start > $3
    ORDER BY window_start DESC
    LIMIT 1
"""

RATE_LIMIT_INCREMENT = """
    UPDATE rate_limits
    SET request_count = request_count + 1
    WHERE id = $1
    RETURNING id, identifier, endpoint, window_start, request_count
"""

RATE_LIMIT_INSERT = """
    INSERT INTO rate_limits (identifier, endpoint, window_start, request_count)
    VALUES ($1, $2, $3, 1)
    RETURNING id, identifier, endpoint, window_start, request_count
"""
