"""
Pydantic schema definitions for API payloads.

Schemas are separated from storage so the API representation is
decoupled from persistence.
"""
