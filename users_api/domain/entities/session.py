"""Authenticated session entity.

A Session is what the authenticator returns for a valid bearer token. It is
immutable and lives for one request only.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True, kw_only=True)
class Session:
    """Identity and domain context resolved from a bearer token.

    Attributes:
        user_id: Authenticated client id.
        domain_id: Domain the token was issued for (may be empty).
        domain_user_id: Domain-qualified user id (``{domain_id}_{user_id}``).
        super_admin: Whether the client is a platform administrator.

    Example:
        >>> session = Session(user_id="u1")
        >>> session.in_domain("d1").domain_user_id
        'd1_u1'
    """

    user_id: str
    domain_id: str = ""
    domain_user_id: str = ""
    super_admin: bool = False

    def in_domain(self, domain_id: str) -> "Session":
        """Return this session re-scoped to ``domain_id``.

        Args:
            domain_id: Domain taken from the request path.

        Returns:
            Session: New session with domain fields replaced.
        """
        return replace(
            self,
            domain_id=domain_id,
            domain_user_id=f"{domain_id}_{self.user_id}",
        )
