"""
Pydantic schemas for the summarization API.
"""
from pydantic import BaseModel, Field
from typing import Optional


class TextSummarizationRequest(BaseModel):
    """Raw text summarization request."""
    text: Optional[str] = Field(None, description="Text to summarize")
    request_id: Optional[str] = Field(None, description="Request ID (generated if not provided)")
    user_id: Optional[str] = Field(None, description="User identifier for logging")


class UrlSummarizationRequest(BaseModel):
    """Web page summarization request."""
    url: Optional[str] = Field(None, description="URL of the page to summarize")
    request_id: Optional[str] = Field(None, description="Request ID (generated if not provided)")
    user_id: Optional[str] = Field(None, description="User identifier for logging")


class SummarizationResponse(BaseModel):
    """Summary returned to the caller."""
    summary: str = Field(..., description="Generated summary")


class ErrorResponse(BaseModel):
    """Error body for every non-2xx response."""
    error: str = Field(..., description="Error message")
