"""HTTP request and response schemas.

Pydantic models for request body decoding and response serialization. Kept
separate from domain entities; these are transport concerns.
"""
