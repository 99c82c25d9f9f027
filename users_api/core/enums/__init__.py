"""Core enums package.

Usage:
    from users_api.core.enums import ErrorCode, Environment
"""

from users_api.core.enums.environment import Environment
from users_api.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
