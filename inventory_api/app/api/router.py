"""
Top‑level router for the API.

Aggregates the domain routers under the ``/api`` prefix used by the
existing clients.  New domains are added by including their router
here.
"""

from fastapi import APIRouter

from .endpoints import products, users

router = APIRouter()

router.include_router(users.router, tags=["users"])
router.include_router(products.router, tags=["products"])
