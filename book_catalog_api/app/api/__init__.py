"""
API package containing the catalog routes.

``router.py`` exposes a top‑level ``router`` that includes the guest
routes at the root and the subscriber routes under ``/subscriber``.
"""
