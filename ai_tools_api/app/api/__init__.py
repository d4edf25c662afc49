"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` which includes the
resource routers from ``endpoints``.  Resources are mounted under
``/api``; the health check lives at the service root.
"""
