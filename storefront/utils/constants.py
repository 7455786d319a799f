"""
Shared constants for request schemas.
"""

# 24 hexadecimal digits (MongoDB ObjectId string form)
OBJECT_ID_PATTERN = r'^[0-9a-fA-F]{24}$'

# Pagination query defaults (kept as strings, they arrive from the query string)
DEFAULT_PAGE = "1"
DEFAULT_LIMIT = "10"

# Message reported for a missing required field
REQUIRED_MESSAGE = "required"
