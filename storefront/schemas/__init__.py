"""
Pydantic schemas for request validation and API responses.

Request models subclass RequestSchema (camelCase wire names, unknown keys
dropped). All of them are registered by name in schemas.registry.
"""
