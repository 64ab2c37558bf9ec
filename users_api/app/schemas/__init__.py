"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stores so the API representation does
not depend on how records are persisted.
"""
