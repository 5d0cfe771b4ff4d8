"""Configuration management for the Splurge Master Password system.

Only application defaults live here. Algorithm constants are in
``constants.py`` and are not configurable.
"""

import os
from dataclasses import dataclass, field

from splurge_master_password.constants import Constants
from splurge_master_password.exceptions import ValidationError
from splurge_master_password.tables import PasswordType

CONFIG_FILE_ENV = "SMP_CONFIG_FILE"
PASSWORD_TYPE_ENV = "SMP_PASSWORD_TYPE"


def default_config_file() -> str:
    """Compute a platform-appropriate default site list path."""
    # Environment override for tests/CI or advanced users
    env_file = os.getenv(CONFIG_FILE_ENV)
    if env_file:
        return env_file

    # Windows: use %APPDATA%\splurge-master-password
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "splurge-master-password", "sites.json")

    # POSIX: ~/.config/splurge-master-password
    home = os.path.expanduser("~")
    if home:
        return os.path.join(home, ".config", "splurge-master-password", "sites.json")

    return os.path.join(os.getcwd(), ".smp", "sites.json")


def _default_password_type() -> PasswordType:
    value = os.getenv(PASSWORD_TYPE_ENV)
    return PasswordType.parse(value) if value else PasswordType.LONG


@dataclass
class MasterPasswordConfig:
    """Configuration for the command-line application."""

    default_password_type: PasswordType = field(default_factory=_default_password_type)
    default_counter: int = Constants.DEFAULT_COUNTER()
    config_file: str = field(default_factory=default_config_file)
    max_input_length: int = 1000

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.default_password_type = PasswordType.parse(self.default_password_type)

        if isinstance(self.default_counter, bool) or not isinstance(self.default_counter, int):
            raise ValidationError("default_counter must be an integer")
        if self.default_counter < 0 or self.default_counter > Constants.MAX_UINT32():
            raise ValidationError("default_counter must fit in an unsigned 32-bit integer")
        if not self.config_file:
            raise ValidationError("config_file cannot be empty")
        if self.max_input_length < 1:
            raise ValidationError("max_input_length must be at least 1")
