"""Core enums."""

from crm_core.core.enums.environment import Environment
from crm_core.core.enums.error_code import ErrorCode

__all__ = [
    "Environment",
    "ErrorCode",
]
