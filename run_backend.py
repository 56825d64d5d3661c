#!/usr/bin/env python3
"""Start the Building Model Generator API server."""

import uvicorn

from modelgen import config

if __name__ == "__main__":
    uvicorn.run(
        "modelgen.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
        reload_dirs=["modelgen"],
    )
