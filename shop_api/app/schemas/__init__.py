"""
Pydantic schema definitions for API payloads.

Each domain (products, users, orders) defines its own Pydantic models
for request and response bodies.  Request models run in strict mode so
that wrongly typed input is rejected instead of coerced.  Schemas are
separated from the stored documents to keep the API representation
independent from persistence (e.g. user digests are never exposed).
"""
