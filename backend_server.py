"""
Run FastAPI HTTP Server

Starts the FastAPI server for the landing page and lead-capture form.
"""

import uvicorn
from app.config import get_config

if __name__ == "__main__":
    config = get_config()

    # PORT belongs to the upload relay, this server listens on SERVER_PORT
    uvicorn.run(
        "app.api.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=False,  # Disable reload for production
        log_level="info",
    )
