"""
Application package initializer.

The code is organised into ``core`` (settings, logging, storage,
errors and value parsing), ``schemas`` (pydantic payloads),
``services`` (the user store and the log filter) and ``api`` (the
FastAPI routers).  ``main`` wires these together.
"""

from .main import app  # noqa: F401
