"""
App assembly entry point.

Re-exports the FastAPI `app` from `grouptherapy.api.main` so the service
can be started with `uvicorn app:app`.
"""

from grouptherapy.api.main import app  # noqa: F401
