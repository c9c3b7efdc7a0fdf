# app/models/errors.py

from pydantic import BaseModel, Field


class ErrorPayload(BaseModel):
    """Error body returned by the verification and OCR routes."""

    error: str
    message: str
    details: str = ""
    troubleshooting: list[str] = Field(default_factory=list)
