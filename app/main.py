"""
Application entrypoint.

Re-exports the FastAPI `app` instance from `app.api.main` so that
`uvicorn app.main:app` works alongside `app.api.main:app`.
"""

from app.api.main import app  # noqa: F401
