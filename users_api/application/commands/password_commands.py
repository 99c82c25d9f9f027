"""Password reset commands.

Two-step flow: a reset request mails a reset token to the client's identity,
then a reset carries that token back together with the new password.
"""

import re
from dataclasses import dataclass

from users_api.core.enums import ErrorCode
from users_api.core.errors import ValidationError
from users_api.core.result import Failure, Result
from users_api.core.validation import first_failure, validate_not_empty, validate_password


@dataclass(frozen=True, kw_only=True)
class ResetSecretRequest:
    """Ask for a password reset link.

    Attributes:
        email: Identity of the client asking for a reset.
        host: Origin of the reset page, taken from the Referer header.
    """

    email: str = ""
    host: str = ""

    def validate(self) -> Result[None, ValidationError]:
        """Require both the email and the host."""
        return first_failure(
            validate_not_empty(self.email, "email", code=ErrorCode.MISSING_EMAIL),
            validate_not_empty(self.host, "host", code=ErrorCode.MISSING_HOST),
        )


@dataclass(frozen=True, kw_only=True)
class ResetSecret:
    """Set a new password using a reset token.

    The token is authenticated like a bearer token before ``validate()`` runs.

    Attributes:
        token: Reset token from the emailed link.
        password: New password.
        confirm_password: Repeated new password.
        password_pattern: Compiled password policy.
    """

    token: str = ""
    password: str = ""
    confirm_password: str = ""
    password_pattern: re.Pattern[str]

    def validate(self) -> Result[None, ValidationError]:
        """Require a password, a matching confirmation and policy compliance."""
        if self.password and self.password != self.confirm_password:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PASSWORD_MISMATCH,
                    message="password and confirm password do not match",
                    field="confirm_password",
                )
            )
        return first_failure(validate_password(self.password, self.password_pattern))
