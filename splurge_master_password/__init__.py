"""Splurge Master Password - stateless site password derivation.

This package implements the Master Password algorithm: a user name and a
master password derive a master key, the master key and a site name derive
a template seed, and the seed renders a site password. No password is ever
stored; a small site list keeps only site metadata.
"""

from importlib.metadata import PackageNotFoundError, version

from splurge_master_password.algorithm import (
    MasterPasswordAlgorithm,
    derive_master_key,
    derive_template_seed,
    generate_password,
    render_password,
)
from splurge_master_password.exceptions import (
    ConfigurationError,
    FileOperationError,
    InputError,
    MasterKeyError,
    MasterPasswordError,
    ValidationError,
)
from splurge_master_password.secret_buffer import SecretBuffer
from splurge_master_password.services import MasterPasswordSession, SiteService
from splurge_master_password.tables import PasswordType, Tables

try:
    __version__ = version("splurge-master-password")
except PackageNotFoundError:
    # Running from a source checkout without installed metadata
    __version__ = "unknown"

__all__ = [
    "ConfigurationError",
    "FileOperationError",
    "InputError",
    "MasterKeyError",
    "MasterPasswordAlgorithm",
    "MasterPasswordError",
    "MasterPasswordSession",
    "PasswordType",
    "SecretBuffer",
    "SiteService",
    "Tables",
    "ValidationError",
    "derive_master_key",
    "derive_template_seed",
    "generate_password",
    "render_password",
]
