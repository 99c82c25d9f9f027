"""Password reset request/response schemas.

Endpoints:
    POST /password/reset-request  - Email a reset link (host from Referer)
    PUT  /password/reset          - Set a new password with a reset token
"""

from pydantic import BaseModel, Field

from users_api.schemas.common_schemas import RequestBody


class PasswordResetRequestBody(RequestBody):
    """POST /password/reset-request"""

    email: str = Field(default="", examples=["alice@example.com"])


class PasswordResetBody(RequestBody):
    """PUT /password/reset"""

    token: str = ""
    password: str = ""
    confirm_password: str = ""


class PasswordResetMessageResponse(BaseModel):
    """Acknowledgement for password reset endpoints (201 Created)."""

    msg: str = Field(
        ...,
        examples=["Email with reset link is sent"],
    )
