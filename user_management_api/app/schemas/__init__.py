"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the store's record type so the API
representation is decoupled from storage.
"""
