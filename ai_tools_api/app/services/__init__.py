"""
Service layer abstraction.

Each service encapsulates the business logic for one resource.  The
services operate on the in‑memory ``Catalog`` and ``FavoritesStore``
passed to them and raise ``core.errors`` exceptions on failure, so the
API handlers stay thin.
"""
