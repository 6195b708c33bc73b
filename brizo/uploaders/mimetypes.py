"""Content-type inference from filename extensions."""

from __future__ import annotations

from pathlib import PurePath
from types import MappingProxyType

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = MappingProxyType(
    {
        # Images
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "png": "image/png",
        "gif": "image/gif",
        "webp": "image/webp",
        "svg": "image/svg+xml",
        "ico": "image/x-icon",
        "bmp": "image/bmp",
        "tiff": "image/tiff",
        "tif": "image/tiff",
        # Documents
        "pdf": "application/pdf",
        "doc": "application/msword",
        "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "xls": "application/vnd.ms-excel",
        "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "ppt": "application/vnd.ms-powerpoint",
        "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "odt": "application/vnd.oasis.opendocument.text",
        "ods": "application/vnd.oasis.opendocument.spreadsheet",
        # Text
        "txt": "text/plain",
        "html": "text/html",
        "htm": "text/html",
        "css": "text/css",
        "csv": "text/csv",
        "xml": "text/xml",
        "md": "text/markdown",
        # Code
        "js": "application/javascript",
        "mjs": "application/javascript",
        "json": "application/json",
        "ts": "text/typescript",
        "py": "text/x-python",
        "rb": "text/x-ruby",
        "java": "text/x-java",
        "c": "text/x-c",
        "cpp": "text/x-c++",
        "h": "text/x-c",
        "hpp": "text/x-c++",
        "go": "text/x-go",
        "rs": "text/x-rust",
        "php": "application/x-php",
        "sh": "application/x-sh",
        "yaml": "text/yaml",
        "yml": "text/yaml",
        # Audio
        "mp3": "audio/mpeg",
        "wav": "audio/wav",
        "ogg": "audio/ogg",
        "m4a": "audio/mp4",
        "flac": "audio/flac",
        "aac": "audio/aac",
        # Video
        "mp4": "video/mp4",
        "webm": "video/webm",
        "avi": "video/x-msvideo",
        "mov": "video/quicktime",
        "mkv": "video/x-matroska",
        "wmv": "video/x-ms-wmv",
        # Archives
        "zip": "application/zip",
        "rar": "application/x-rar-compressed",
        "7z": "application/x-7z-compressed",
        "tar": "application/x-tar",
        "gz": "application/gzip",
        "bz2": "application/x-bzip2",
        # Fonts
        "woff": "font/woff",
        "woff2": "font/woff2",
        "ttf": "font/ttf",
        "otf": "font/otf",
        "eot": "application/vnd.ms-fontobject",
        # Binaries
        "exe": "application/x-msdownload",
        "dll": "application/x-msdownload",
        "dmg": "application/x-apple-diskimage",
        "iso": "application/x-iso9660-image",
        "apk": "application/vnd.android.package-archive",
    }
)


def get_mime_type(filename: str) -> str:
    """Look up the content type for a filename by its last extension.

    Args:
        filename: File name or path.

    Returns:
        Content type, or ``application/octet-stream`` for unknown extensions.
    """
    ext = PurePath(filename).suffix.lower().lstrip(".")
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)
