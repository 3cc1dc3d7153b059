"""Shared authentication utilities for API projects."""

from .dependencies import get_current_user, security
from .models import User
from .validator import TokenValidator, get_validator, set_validator

__all__ = [
    "get_current_user",
    "security",
    "User",
    "TokenValidator",
    "get_validator",
    "set_validator",
]
