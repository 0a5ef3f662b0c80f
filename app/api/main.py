"""
FastAPI Application

HTTP server for the ResumeEdge landing page and lead-capture form.
"""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_config
from app.api import landing as landing_api
from app.utils.logger import get_logger, setup_logging

config = get_config()
setup_logging(config)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="ResumeEdge API",
    description="Landing page and lead-capture form for AI resume optimization",
    version="1.0.0",
)

_cors_origins = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]
if config.server.frontend_url:
    _cors_origins.append(config.server.frontend_url.rstrip("/"))
# Extra origins from env (comma-separated), e.g. CORS_ORIGINS=https://resumeedge.example
_extra_origins = os.getenv("CORS_ORIGINS", "")
if _extra_origins:
    for o in _extra_origins.split(","):
        o = o.strip().rstrip("/")
        if o and o not in _cors_origins:
            _cors_origins.append(o)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(landing_api.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
