"""
Endpoint subpackage.

Each module defines an APIRouter for one resource (tools, favorites,
health).  The routers are aggregated in ``api/router.py``.
"""
