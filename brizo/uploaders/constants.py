"""Shared constants for upload modules."""

# =============================================================================
# Upload Endpoints
# =============================================================================

PRESIGN_PATH = "/v1/upload/presign"
COMPLETE_PATH = "/v1/upload/complete"

# =============================================================================
# Batch Defaults
# =============================================================================

# Uploads in flight per group
DEFAULT_CONCURRENCY = 3

# Empty folder id targets the root folder
ROOT_FOLDER_ID = ""

# Progress sink values around the byte transfer
PROGRESS_START = 0
PROGRESS_DONE = 100
