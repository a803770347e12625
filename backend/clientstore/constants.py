"""
Application constants with documented reasoning.

This file centralizes "magic numbers" used throughout the codebase,
providing clear documentation for why each value was chosen.
"""

# =============================================================================
# DATABASE
# =============================================================================

# Default database location, relative to the working directory
DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./clientstore.db"

# SQLite busy timeout - wait up to 5s for locks to release
# Prevents "database is locked" errors when a delete transaction is open
SQLITE_BUSY_TIMEOUT_MS = 5000

# Isolation used for the cascading client delete.
# SQLite only offers SERIALIZABLE (or READ UNCOMMITTED), which is stronger
# than what the delete needs; every other backend gets READ COMMITTED.
SQLITE_DELETE_ISOLATION_LEVEL = "SERIALIZABLE"
DEFAULT_DELETE_ISOLATION_LEVEL = "READ COMMITTED"

# =============================================================================
# ACTIONS
# =============================================================================

# client_id stored on an action that no longer points at a download client
NO_CLIENT_ID = 0

# =============================================================================
# LOGGING
# =============================================================================

# Rotate the log file once it reaches 10 MB, keep a week of history
LOG_FILE_ROTATION = "10 MB"
LOG_FILE_RETENTION = "7 days"
