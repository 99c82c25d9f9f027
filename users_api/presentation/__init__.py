"""Presentation layer - HTTP endpoints and transport concerns.

Structure:
- api/middleware/: ASGI middleware (trace ids)
- routers/api/: query parsing, body decoding, authentication gateway,
  request dispatcher, error mapping, route handlers and the route registry

The presentation layer validates and dispatches requests; business rules
live in the external users and group services.
"""
