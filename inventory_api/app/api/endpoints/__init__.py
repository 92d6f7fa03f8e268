"""
Endpoint subpackage.

Each module defines an ``APIRouter`` for one domain (users,
products).  The routers are aggregated in ``api/router.py`` and then
included in the main application.
"""
