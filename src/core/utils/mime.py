"""Content type detection from file signatures."""

from collections.abc import Mapping

MAGIC_BYTES: Mapping[bytes, str] = {
    b"\xff\xd8\xff": "image/jpeg",
    b"\x89PNG\r\n\x1a\n": "image/png",
    b"GIF87a": "image/gif",
    b"GIF89a": "image/gif",
}

# RIFF container: "RIFF" <4-byte size> "WEBP"
WEBP_RIFF_HEADER = b"RIFF"
WEBP_FORMAT_TAG = b"WEBP"


def detect_mime_type(file_data: bytes) -> str:
    """Return the image MIME type implied by the leading bytes.

    Raises:
        ValueError: If the signature is not a recognized image format
    """
    for signature, mime in MAGIC_BYTES.items():
        if file_data.startswith(signature):
            return mime

    if file_data.startswith(WEBP_RIFF_HEADER) and file_data[8:12] == WEBP_FORMAT_TAG:
        return "image/webp"

    raise ValueError("Unsupported or unknown file type")
