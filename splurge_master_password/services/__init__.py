"""Services package for Splurge Master Password."""

from splurge_master_password.services.password_service import MasterPasswordSession
from splurge_master_password.services.site_service import SiteService

__all__ = [
    "MasterPasswordSession",
    "SiteService",
]
