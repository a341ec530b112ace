"""
Top-level router for version 1 of the API.

Aggregates the domain routers under a unified router that ``main``
mounts at ``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
# NOTE: Earlier clients used the singular ``/user`` base path.  The same
# router is included a second time under that prefix so both keep
# working; only the plural form appears in the OpenAPI schema.
router.include_router(users.router, prefix="/user", tags=["users"], include_in_schema=False)
