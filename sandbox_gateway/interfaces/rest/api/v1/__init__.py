"""
REST API routes
"""
from sandbox_gateway.interfaces.rest.api.v1 import code, health

__all__ = ["code", "health"]
