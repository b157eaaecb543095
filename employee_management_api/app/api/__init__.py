"""
API package containing the HTTP routes.

Versioned routes live in subpackages such as ``v1``, each exposing a
top‑level ``router``.  ``compat`` serves the verb‑style paths used by
the existing web client.
"""
