"""
Service layer abstraction.

Services encapsulate business logic and sit between the API handlers
and the in‑memory store, so the store could be swapped for a database
without changing the handlers.
"""
