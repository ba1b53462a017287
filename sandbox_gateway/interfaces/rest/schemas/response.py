"""
REST API response schemas
"""
from typing import List, Optional

from pydantic import BaseModel


class RunCodeResponse(BaseModel):
    """Classified outcome; output is omitted for timeouts"""
    message: str
    output: Optional[str] = None


class RuntimeResponse(BaseModel):
    language: str
    version: str


class RuntimeListResponse(BaseModel):
    runtimes: List[RuntimeResponse]


class ErrorResponse(BaseModel):
    """Error response"""
    message: str
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "healthy"
    version: str
    uptime: float
