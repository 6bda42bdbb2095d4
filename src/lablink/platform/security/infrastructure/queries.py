"""Security alert SQL query constants.

Following maximum separation architecture - one file = one purpose.
"""

SECURITY_ALERT_INSERT = """
    INSERT INTO security_alerts (
        alert_type, severity, title, description,
        user_id, ip_address, user_agent, metadata
    ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8::jsonb)
"""

ADMIN_NOTIFICATION_INSERT = """
    INSERT INTO admin_notifications (title, message, severity, category, metadata)
    VALUES ($1, $2, $3, $4, $5::jsonb)
"""
