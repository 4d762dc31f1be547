"""REST API for The Paradox Wheel.

Exports:
    create_app: Build the FastAPI application.
    main: Run the server with uvicorn (``paradox-wheel-api``).
"""

from paradox_wheel.api.app import create_app, main

__all__ = [
    "create_app",
    "main",
]
