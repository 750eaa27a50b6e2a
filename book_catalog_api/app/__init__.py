"""
Application package initializer.

The application is split into a small number of layers: ``core``
holds configuration, logging, security and the in‑memory stores,
``schemas`` defines the pydantic models, ``services`` contains the
business rules and ``api`` exposes them as FastAPI routers.  Guests
use the routes mounted at the root, registered users the routes
mounted under ``/subscriber``.
"""

from .main import app  # noqa: F401
