"""
Application package initializer.

The code is organised in layers: ``core`` (configuration, logging,
errors, password hashing, SQLite helpers), ``schemas`` (pydantic
models), ``stores`` (persistence backends), ``services`` (the
employee service contract) and ``api`` (FastAPI routers).  ``main``
wires them into an application.
"""

from .main import app  # noqa: F401
