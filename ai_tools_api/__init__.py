"""
Top‑level package for the AI Tools API.

The HTTP application lives in the ``app`` subpackage and can be
imported as ``ai_tools_api.app.main``.  A small ``requests`` based
client for talking to a running instance is provided in
``ai_tools_api.client``.
"""

__all__ = []
