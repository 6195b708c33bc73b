"""brizo - async Python client and CLI for the Brizo file storage API.

Provides:
- Presigned uploads (presign, transfer, commit) with progress reporting
- Bounded-concurrency batch uploads with per-item outcomes
- File, folder, metrics, and S3 credential management
- A single ``BrizoError`` type classified from HTTP failures
"""

__version__ = "0.1.0"

from brizo.core.exceptions import BrizoError, ErrorKind, classify
from brizo.models.file import File
from brizo.models.upload import BatchOutcome, UploadRequest
from brizo.sdk import Brizo

__all__ = [
    "__version__",
    "Brizo",
    "BrizoError",
    "ErrorKind",
    "classify",
    "File",
    "UploadRequest",
    "BatchOutcome",
]
