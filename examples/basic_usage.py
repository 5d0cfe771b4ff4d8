#!/usr/bin/env python3
"""Example usage of the Master Password derivation pipeline."""

from splurge_master_password import (
    MasterPasswordSession,
    PasswordType,
    derive_master_key,
    derive_template_seed,
    render_password,
)


def main():
    """Demonstrate the three derivation stages and a reusable session."""

    user_name = "Robert Lee Mitchell"
    master_password = "banana colored duckling"

    # Stage by stage; every secret buffer is wiped when its block ends
    print("Deriving master key (scrypt, this takes a moment)...")
    with derive_master_key(user_name, master_password) as master_key:
        with derive_template_seed(master_key, "masterpasswordapp.com", 1) as seed:
            password = render_password(seed, PasswordType.LONG)
    print(f"masterpasswordapp.com (LongPassword): {password}")
    print()

    # One master key, many sites
    print("Generating passwords for several sites with one session...")
    with MasterPasswordSession(user_name, master_password) as session:
        for site_name, counter, password_type in [
            ("ebay.com", 3, PasswordType.LONG),
            ("ripeyesteaks.com", 1, PasswordType.PIN),
            ("othersite.com", 1, PasswordType.MAXIMUM),
        ]:
            generated = session.password_for(site_name, counter, password_type)
            print(f"  {site_name} #{counter} ({password_type.value}): {generated}")

    print()
    print("Example completed successfully!")


if __name__ == "__main__":
    main()
