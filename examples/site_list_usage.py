#!/usr/bin/env python3
"""Example usage of the stored site list."""

import os
import tempfile

from splurge_master_password import MasterPasswordSession, SiteService
from splurge_master_password.file_manager import FileManager


def main():
    """Store site metadata and regenerate passwords from it."""

    with tempfile.TemporaryDirectory() as temp_dir:
        config_file = os.path.join(temp_dir, "sites.json")
        print(f"Using site list: {config_file}")

        service = SiteService(FileManager(config_file))
        service.set_user_name("John Doe")
        service.add_site("ebay.com", login="jdoe@example.com", counter=3, password_type="LongPassword")
        service.add_site("ripeyesteaks.com", login="john@example.org", password_type="PIN")
        service.add_site("othersite.com", login="doe@example.net", password_type="MaximumSecurityPassword")

        configuration = service.load()
        print(f"Stored {len(configuration.sites)} sites for {configuration.user_name}")
        print()

        # Only metadata was written; passwords are derived on demand
        with MasterPasswordSession(configuration.user_name, "correct horse battery staple") as session:
            for site in configuration.sites:
                password = service.generate_for_site(session, site.site_name)
                print(f"  {site.site_name} ({site.login}): {password}")

        # Rotating a password is just bumping the counter
        service.update_site("ebay.com", counter=4)
        print()
        print("Rotated ebay.com to counter 4")

    print("Example completed successfully!")


if __name__ == "__main__":
    main()
