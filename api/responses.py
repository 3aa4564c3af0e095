"""
Standardized API response models shared by the routers.
"""

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime

from domain.clock import utc_now


class AckResponse(BaseModel):
    """Acknowledgement of a write"""

    success: bool = Field(..., description="Indicates if the operation was successful")
    id: Optional[int] = Field(None, description="Identifier of the stored row")
    message: Optional[str] = Field(None, description="Human-readable message")
    count: Optional[int] = Field(None, description="Number of rows written")


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[dict] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(default_factory=utc_now, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=utc_now, description="Check timestamp")
    service: Optional[str] = Field(None, description="Service name")
    version: Optional[str] = Field(None, description="Service version")


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
    500: {"model": ErrorResponse, "description": "Database failure"},
}
