"""
In‑memory record types.

Records are what the store keeps.  They are separate from the API
schemas in ``schemas`` so that the wire representation can change
without touching the storage layer.
"""
