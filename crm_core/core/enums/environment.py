"""Application environment types.

Used by Settings to pick environment-specific behaviour (log renderer).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
