"""
Response models for HTTP endpoints
"""
from pydantic import BaseModel
from typing import Dict, Optional, Any
from datetime import datetime


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime
    vault: Dict[str, Any]
    token_provider: Dict[str, Any]
    version: str


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
    code: str
    detail: Optional[str] = None
