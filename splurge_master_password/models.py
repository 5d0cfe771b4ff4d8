"""Data models for the Splurge Master Password system.

Only site metadata is modelled here. Passwords are always re-derived and
never become part of a model.
"""

from dataclasses import dataclass, field
from typing import Any

from splurge_master_password.constants import Constants
from splurge_master_password.exceptions import ValidationError
from splurge_master_password.tables import PasswordType
from splurge_master_password.validation_utils import validate_counter, validate_site_name


@dataclass
class SiteEntry:
    """A site the user derives a password for."""

    site_name: str
    login: str = ""
    counter: int = field(default=Constants.DEFAULT_COUNTER())
    password_type: PasswordType = PasswordType.LONG

    def __post_init__(self) -> None:
        """Validate and process fields after initialization."""
        validate_site_name(self.site_name)
        if self.login is None:
            self.login = ""
        if not isinstance(self.login, str):
            raise ValidationError("login must be a string")
        validate_counter(self.counter)

        # Accept "LongPassword", "long", ... from stored data
        self.password_type = PasswordType.parse(self.password_type)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "site_name": self.site_name,
            "login": self.login,
            "counter": self.counter,
            "password_type": self.password_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SiteEntry":
        """Create SiteEntry from dictionary."""
        return cls(
            site_name=data["site_name"],
            login=data.get("login", ""),
            counter=data.get("counter", Constants.DEFAULT_COUNTER()),
            password_type=data.get("password_type", PasswordType.LONG.value),
        )


@dataclass
class SiteConfiguration:
    """A user name and the ordered list of sites it derives passwords for."""

    user_name: str = ""
    sites: list[SiteEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate and process fields after initialization."""
        if self.user_name is None:
            self.user_name = ""
        if not isinstance(self.user_name, str):
            raise ValidationError("user_name must be a string")

        seen: set[str] = set()
        for site in self.sites:
            if site.site_name in seen:
                raise ValidationError(f"Duplicate site name: {site.site_name}")
            seen.add(site.site_name)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "user_name": self.user_name,
            "sites": [site.to_dict() for site in self.sites],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SiteConfiguration":
        """Create SiteConfiguration from dictionary."""
        return cls(
            user_name=data.get("user_name", ""),
            sites=[SiteEntry.from_dict(item) for item in data.get("sites", [])],
        )

    def get_site(self, site_name: str) -> SiteEntry | None:
        """Get a site entry by name."""
        for site in self.sites:
            if site.site_name == site_name:
                return site
        return None

    def has_site(self, site_name: str) -> bool:
        """Check if a site name exists."""
        return self.get_site(site_name) is not None

    def add_site(self, site: SiteEntry) -> None:
        """Append a site entry.

        Raises:
            ValidationError: If a site with the same name exists
        """
        if self.has_site(site.site_name):
            raise ValidationError(f"Site '{site.site_name}' already exists")
        self.sites.append(site)

    def remove_site(self, site_name: str) -> bool:
        """Remove a site entry by name.

        Returns:
            True if a site was removed, False otherwise
        """
        site = self.get_site(site_name)
        if site is None:
            return False
        self.sites.remove(site)
        return True
