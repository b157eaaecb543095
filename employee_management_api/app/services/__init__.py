"""
Service layer abstraction.

Services encapsulate business logic and talk to persistence only
through an injected store, so API handlers do not change when the
storage backend does.
"""
