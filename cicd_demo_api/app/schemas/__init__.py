"""
Pydantic schema definitions for API payloads.

Each domain (users, posts, dashboard, system) defines its own Pydantic
models for request and response bodies.  Schemas are separated from
the store's records to decouple API representation from storage.
"""
