"""HTTP routers.

- api/: the users API (registry-generated routes)
- system: root and health endpoints
"""
