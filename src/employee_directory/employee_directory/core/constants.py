"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_HOURS = 24
TOKEN_ALGORITHM = "HS256"

MIN_PASSWORD_LENGTH = 6
MIN_USERNAME_LENGTH = 3

SNAPSHOT_COLLECTIONS = ("companies", "departments", "users", "employees")
