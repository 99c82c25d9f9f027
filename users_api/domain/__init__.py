"""Domain layer - entities, enums and collaborator protocols.

Structure:
- entities/: Client, Session, Token and page snapshots
- enums/: Client status and role, member scopes, sort direction
- protocols/: Interfaces of the external users service, group service,
  authenticator and logger

The domain layer has NO dependencies on any framework.
"""
