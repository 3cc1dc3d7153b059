"""Pluggable token validation for the authentication dependency."""

import logging
from typing import Optional, Protocol

from .models import User

logger = logging.getLogger(__name__)


class TokenValidator(Protocol):
    """
    Turns a bearer token into a User.

    Implementations raise HTTPException (401 for invalid tokens) on failure.
    """

    def validate_token(self, token: str) -> User:
        ...


_validator: Optional[TokenValidator] = None


def set_validator(validator: Optional[TokenValidator]) -> None:
    """Register the validator used by get_current_user (None to unregister)."""
    global _validator
    _validator = validator
    if validator is not None:
        logger.info(f"Token validator registered: {type(validator).__name__}")


def get_validator() -> Optional[TokenValidator]:
    """Get the registered token validator, if any."""
    return _validator
