"""Validation utilities for the master password package."""

from splurge_master_password.constants import Constants
from splurge_master_password.exceptions import InputError, ValidationError


def validate_counter(counter: int) -> None:
    """Validate a site counter.

    Args:
        counter: Rotation counter

    Raises:
        InputError: If counter is not an unsigned 32-bit integer
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise InputError(f"Counter must be an integer, got {type(counter).__name__}")

    if counter < 0 or counter > Constants.MAX_UINT32():
        raise InputError(f"Counter must be between 0 and {Constants.MAX_UINT32()}")


def validate_site_name(name: str) -> None:
    """Validate site name requirements for stored site entries.

    Derivation itself accepts any string; stored sites need a usable name.

    Args:
        name: Site name to validate

    Raises:
        ValidationError: If name doesn't meet requirements
    """
    if name is None:
        raise ValidationError("Site name cannot be None")

    if not isinstance(name, str):
        raise ValidationError("Site name must be a string")

    if name.strip() == "":
        raise ValidationError("Site name cannot be empty")

    if len(name) > Constants.MAX_SITE_NAME_LENGTH():
        raise ValidationError(
            f"Site name is too long (maximum {Constants.MAX_SITE_NAME_LENGTH()} characters)"
        )

    if '\x00' in name:
        raise ValidationError("Site name cannot contain null bytes")
