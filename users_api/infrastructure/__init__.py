"""Infrastructure layer - adapters for external systems.

Structure:
- logging/: structlog console adapter implementing LoggerProtocol
- authn/: httpx client implementing AuthenticatorProtocol against the
  remote authentication service
"""
