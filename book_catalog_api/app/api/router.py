"""
Top‑level router for the catalog API.

Guest routes are mounted at the root and subscriber routes under
``/subscriber``.  The subscriber module itself nests the
session-guarded routes under ``/subscriber/auth``.
"""

from fastapi import APIRouter

from .endpoints import guest, subscriber

router = APIRouter()

router.include_router(subscriber.router, prefix="/subscriber", tags=["subscriber"])
router.include_router(guest.router, tags=["guest"])
