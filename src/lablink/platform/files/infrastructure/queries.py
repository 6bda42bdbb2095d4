"""Attachment SQL query constants.

Following maximum separation architecture - one file = one purpose.
"""

ATTACHMENT_INSERT = """
    INSERT INTO order_attachments (
        order_id, uploaded_by, file_name, file_path,
        file_type, file_size, attachment_category
    ) VALUES ($1, $2, $3, $4, $5, $6, $7)
    RETURNING *
"""
