"""
Pydantic schema definitions for API payloads.

Schemas are separated from table definitions to decouple the API
representation from persistence.
"""
