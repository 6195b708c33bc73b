"""Upload helpers for brizo.

Chunking, progress arithmetic, and content-type inference used by
``UploadService`` in ``brizo.services.uploads``.
"""

from brizo.uploaders.common import percent_complete, split_into_batches
from brizo.uploaders.constants import (
    COMPLETE_PATH,
    DEFAULT_CONCURRENCY,
    PRESIGN_PATH,
    ROOT_FOLDER_ID,
)
from brizo.uploaders.mimetypes import DEFAULT_MIME_TYPE, MIME_TYPES, get_mime_type

__all__ = [
    # Constants
    "COMPLETE_PATH",
    "DEFAULT_CONCURRENCY",
    "PRESIGN_PATH",
    "ROOT_FOLDER_ID",
    # Common utilities
    "percent_complete",
    "split_into_batches",
    # MIME types
    "DEFAULT_MIME_TYPE",
    "MIME_TYPES",
    "get_mime_type",
]
