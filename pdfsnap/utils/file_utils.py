from typing import Optional

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp")

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB")


def is_allowed_image(media_type: Optional[str]) -> bool:
    """Exact match against the declared media type; the content is not sniffed."""
    return media_type in ALLOWED_IMAGE_TYPES


def format_size(size_bytes: int) -> str:
    """
    Human readable size in base 1024 with one decimal place.

    Sizes beyond the last unit stay expressed in that unit.
    """
    if size_bytes < 0:
        raise ValueError("size_bytes must be >= 0")
    if size_bytes == 0:
        return "0 Bytes"

    index = 0
    while index < len(SIZE_UNITS) - 1 and size_bytes >= 1024 ** (index + 1):
        index += 1

    return f"{size_bytes / 1024 ** index:.1f} {SIZE_UNITS[index]}"


def derive_pdf_name(source_name: str) -> str:
    # Everything from the first dot on is dropped: "my.photo.jpg" -> "my.pdf".
    return source_name.split(".")[0] + ".pdf"

