"""Order SQL query constants.

Following maximum separation architecture - one file = one purpose.
"""

ORDER_INSERT = """
    INSERT INTO orders (
        doctor_id, doctor_name, patient_name, restoration_type, teeth_shade,
        shade_system, teeth_number, biological_notes, urgency, status,
        assigned_lab_id, photos_link, html_export
    ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13)
    RETURNING id, order_number, patient_name, restoration_type, urgency,
              status, created_at, assigned_lab_id
"""

ORDER_FIND_RECENT_DUPLICATE = """
    SELECT order_number
    FROM orders
    WHERE doctor_id = $1
      AND lower(patient_name) = lower($2)
      AND teeth_number = $3
      AND created_at >= $4
    ORDER BY created_at DESC
    LIMIT 1
"""
