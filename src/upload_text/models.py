# src/upload_text/models.py
"""
Invocation payloads.

Input:  {"textBody": "<text>"}   (field may be omitted)
Output: {"message": "Succeeded."}
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

SUCCESS_MESSAGE = "Succeeded."


class UploadRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text_body: Optional[str] = Field(default=None, alias="textBody")

    @classmethod
    def from_event(cls, event: Optional[Dict[str, Any]]) -> "UploadRequest":
        """Build a request from a direct Lambda invocation event. Unknown keys are ignored."""
        return cls.model_validate(event or {})


class UploadResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str = SUCCESS_MESSAGE
