#!/usr/bin/env python3
"""Development server startup script."""

import uvicorn

from sandbox_gateway.infrastructure.config.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "sandbox_gateway.interfaces.rest.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
