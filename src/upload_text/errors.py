# src/upload_text/errors.py
"""
Error types raised by the upload flow.

Validation errors carry an HTTP-like status code and render as
"[<code>] <message>", which is what the Lambda runtime reports as
errorMessage. Configuration errors are fatal and render unprefixed.
"""
from typing import Optional


class TextValidationError(Exception):
    """Rejected request payload."""

    code = 400
    message = "Invalid text body."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class EmptyTextBody(TextValidationError):
    message = "Empty text body."


class TextBodyTooLong(TextValidationError):
    message = "Text body is too long (max: 100)"


class ConfigurationError(Exception):
    """Required environment configuration is missing."""
