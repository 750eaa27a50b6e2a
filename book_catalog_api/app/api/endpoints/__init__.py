"""
Endpoint subpackage.

Each module defines an APIRouter for one group of callers: ``guest``
for unauthenticated browsing and registration, ``subscriber`` for
login and the authenticated book and review mutations.
"""
