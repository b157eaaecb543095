"""
Top‑level package for the Employee Management API.

All functionality lives in submodules under ``app``; import them with
fully qualified names such as ``employee_management_api.app.main``.
"""

__all__ = []
