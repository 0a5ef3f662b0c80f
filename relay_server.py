"""
Run Upload Relay Server

Starts the standalone upload relay (POST /webhook) on PORT, default 3000.
"""

import uvicorn
from app.config import get_relay_config

if __name__ == "__main__":
    relay_config = get_relay_config()

    uvicorn.run(
        "app.relay:app",
        host=relay_config.host,
        port=relay_config.port,
        reload=False,
        log_level="info",
    )
