"""Application layer - request commands and queries.

Structure:
- commands/: Write requests (register, update, status changes, tokens,
  password reset, group membership)
- queries/: Read requests (view, list, search, list members)

Every command and query is a frozen dataclass carrying path, query and body
input, with a ``validate()`` that returns ``Result[None, ValidationError]``.
The business work itself is done by the external users and group services.
"""
