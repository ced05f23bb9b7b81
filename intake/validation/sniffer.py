"""Magic-number check of a file's first bytes against its declared media type."""

SNIFF_WINDOW = 16
_MIN_HEADER = 4

_PDF_MAGIC = b"%PDF"
_JPEG_MAGIC = b"\xff\xd8"
_PNG_MAGIC = b"\x89PNG"

SIGNATURES: dict[str, bytes] = {
    "application/pdf": _PDF_MAGIC,
    "image/jpeg": _JPEG_MAGIC,
    "image/jpg": _JPEG_MAGIC,
    "image/png": _PNG_MAGIC,
}


def sniff(content: bytes, declared_media_type: str) -> bool:
    """Return True when the leading bytes match the declared media type.

    False for unknown declared types, for input shorter than 4 bytes and on
    any signature mismatch.
    """
    header = content[:SNIFF_WINDOW]
    if len(header) < _MIN_HEADER:
        return False
    signature = SIGNATURES.get(declared_media_type.lower())
    if signature is None:
        return False
    return header.startswith(signature)
