"""Application environment types.

Used by Settings and the logger factory to pick environment-specific
behavior (JSON log output in testing and CI).

Environments:
- DEVELOPMENT: Local development with console logs
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Deployed service
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
