"""Custom exceptions for the Splurge Master Password system."""


class MasterPasswordError(Exception):
    """Base exception for all Master Password errors."""


class ConfigurationError(MasterPasswordError):
    """Raised when the template or character tables are incomplete."""


class ValidationError(MasterPasswordError):
    """Raised when data validation fails."""


class InputError(ValidationError):
    """Raised when an input cannot be encoded for key or seed derivation."""


class MasterKeyError(MasterPasswordError):
    """Raised when master key operations fail."""


class FileOperationError(MasterPasswordError):
    """Raised when file operations fail."""
