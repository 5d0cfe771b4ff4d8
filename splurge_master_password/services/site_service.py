"""Site service for managing the stored site list."""

import logging

from splurge_master_password.constants import Constants
from splurge_master_password.exceptions import ValidationError
from splurge_master_password.file_manager import FileManager
from splurge_master_password.models import SiteConfiguration, SiteEntry
from splurge_master_password.services.password_service import MasterPasswordSession
from splurge_master_password.tables import PasswordType

logger = logging.getLogger(__name__)


class SiteService:
    """Service for site list operations backed by a ``FileManager``."""

    def __init__(self, file_manager: FileManager):
        """Initialize the site service.

        Args:
            file_manager: File manager instance
        """
        self._file_manager = file_manager

    def load(self) -> SiteConfiguration:
        """Load the site list (empty if no file exists yet)."""
        return self._file_manager.load_or_create()

    def list_sites(self) -> list[SiteEntry]:
        """List all stored sites in order."""
        return list(self.load().sites)

    def get_site(self, site_name: str) -> SiteEntry:
        """Get a stored site.

        Raises:
            ValidationError: If the site is not stored
        """
        site = self.load().get_site(site_name)
        if site is None:
            raise ValidationError(f"Site '{site_name}' not found")
        return site

    def set_user_name(self, user_name: str) -> None:
        """Store the user name used for master key derivation."""
        configuration = self.load()
        configuration.user_name = user_name
        self._file_manager.save_configuration(configuration)

    def add_site(
        self,
        site_name: str,
        *,
        login: str = "",
        counter: int = Constants.DEFAULT_COUNTER(),
        password_type: PasswordType | str = PasswordType.LONG,
    ) -> SiteEntry:
        """Add a site to the list.

        Returns:
            The stored SiteEntry

        Raises:
            ValidationError: If the site exists or a field is invalid
            FileOperationError: If the list cannot be saved
        """
        configuration = self.load()
        site = SiteEntry(
            site_name=site_name,
            login=login,
            counter=counter,
            password_type=password_type,
        )
        configuration.add_site(site)
        self._file_manager.save_configuration(configuration)

        logger.info("Site added", extra={
            "counter": site.counter,
            "password_type": site.password_type.value,
            "event": "site_added"
        })
        return site

    def update_site(
        self,
        site_name: str,
        *,
        login: str | None = None,
        counter: int | None = None,
        password_type: PasswordType | str | None = None,
    ) -> SiteEntry:
        """Update fields of a stored site; ``None`` leaves a field unchanged.

        Raises:
            ValidationError: If the site is not stored or a field is invalid
        """
        configuration = self.load()
        existing = configuration.get_site(site_name)
        if existing is None:
            raise ValidationError(f"Site '{site_name}' not found")

        updated = SiteEntry(
            site_name=existing.site_name,
            login=existing.login if login is None else login,
            counter=existing.counter if counter is None else counter,
            password_type=existing.password_type if password_type is None else password_type,
        )
        configuration.sites[configuration.sites.index(existing)] = updated
        self._file_manager.save_configuration(configuration)

        logger.info("Site updated", extra={
            "counter": updated.counter,
            "password_type": updated.password_type.value,
            "event": "site_updated"
        })
        return updated

    def remove_site(self, site_name: str) -> None:
        """Remove a stored site.

        Raises:
            ValidationError: If the site is not stored
        """
        configuration = self.load()
        if not configuration.remove_site(site_name):
            raise ValidationError(f"Site '{site_name}' not found")
        self._file_manager.save_configuration(configuration)

        logger.info("Site removed", extra={"event": "site_removed"})

    def generate_for_site(self, session: MasterPasswordSession, site_name: str) -> str:
        """Generate the password of a stored site with an open session.

        Args:
            session: Session holding the master key
            site_name: Stored site name

        Returns:
            Generated password
        """
        site = self.get_site(site_name)
        return session.password_for(site.site_name, site.counter, site.password_type)
