"""
Pydantic schema definitions for API payloads.

Schemas are separated from the in‑memory records in ``models`` to
decouple the API representation (camelCase JSON) from storage.
"""
