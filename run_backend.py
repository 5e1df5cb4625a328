#!/usr/bin/env python3
"""Start the Floor Plan Export API server."""

import uvicorn

from floorplan.config import Settings, configure_logging

if __name__ == "__main__":
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(
        "floorplan.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        reload_dirs=["floorplan"],
        log_level=settings.log_level.lower(),
    )
