"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn lyra_pulse.api_server.app:app --host 0.0.0.0 --port 8000
"""

from lyra_pulse.api_server.server import app

__all__ = ["app"]
