# src/upload_text/validation.py
from typing import Optional

from .errors import EmptyTextBody, TextBodyTooLong

MAX_TEXT_BYTES = 100


def validate_text(text: Optional[str]) -> str:
    """
    Return text unchanged if it may be stored.

    Length is measured in UTF-8 bytes, so multi-byte characters count
    more than once. An empty string is present and therefore accepted.
    """
    if text is None:
        raise EmptyTextBody()
    if len(text.encode("utf-8")) > MAX_TEXT_BYTES:
        raise TextBodyTooLong()
    return text
