"""
Application package initializer.

This package contains the HTTP application for the AI Tools API.  The
code is split into ``core`` (configuration, logging, errors and
in‑memory storage), ``schemas`` (pydantic models), ``services``
(business logic) and ``api`` (route handlers).
"""

from .main import app, create_app  # noqa: F401
