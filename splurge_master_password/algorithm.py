"""Master Password algorithm (version 3).

Usage::

    master_key = derive_master_key(user_name, master_password)
    seed = derive_template_seed(master_key, site_name, counter)
    password = render_password(seed, PasswordType.LONG)

Every stage is a pure function of its inputs. Master keys and seeds are
returned as ``SecretBuffer`` objects owned by the caller, who should close
them (or use them as context managers) once the password is rendered.
"""

import logging
from typing import Union

from splurge_master_password.constants import Constants
from splurge_master_password.crypto_utils import BytesLike, CryptoUtils
from splurge_master_password.exceptions import InputError
from splurge_master_password.secret_buffer import SecretBuffer
from splurge_master_password.tables import PasswordType, Tables
from splurge_master_password.validation_utils import validate_counter

logger = logging.getLogger(__name__)

SecretLike = Union[SecretBuffer, BytesLike]


class MasterPasswordAlgorithm:
    """Key derivation, seed derivation and password rendering."""

    @staticmethod
    def _as_view(value: SecretLike, *, field: str) -> memoryview:
        if isinstance(value, SecretBuffer):
            if value.closed:
                raise InputError(f"{field} has already been wiped")
            return value.view()
        if isinstance(value, (bytes, bytearray, memoryview)):
            return memoryview(value)
        raise InputError(f"{field} must be a SecretBuffer or bytes-like value")

    @classmethod
    def master_key_salt(cls, user_name: str) -> bytes:
        """Build the scrypt salt: scheme tag, be32 name length, UTF-8 name."""
        return CryptoUtils.scheme_tag() + CryptoUtils.encode_length_prefixed(user_name, field="User name")

    @classmethod
    def seed_message(cls, site_name: str, counter: int) -> bytes:
        """Build the HMAC message: scheme tag, be32 site length, UTF-8 site, be32 counter."""
        validate_counter(counter)
        return (
            CryptoUtils.scheme_tag()
            + CryptoUtils.encode_length_prefixed(site_name, field="Site name")
            + CryptoUtils.encode_uint32(counter)
        )

    @classmethod
    def derive_master_key(cls, user_name: str, master_password: str) -> SecretBuffer:
        """Derive the 64-byte master key from a user name and master password.

        This is the expensive step: scrypt with N=32768, r=8, p=2.

        Args:
            user_name: User's full name (may be empty)
            master_password: Master password

        Returns:
            SecretBuffer holding the 64-byte master key

        Raises:
            InputError: If an argument is not valid text or is too long to encode
            MasterKeyError: If the KDF cannot run
        """
        if not isinstance(master_password, str):
            raise InputError("Master password must be a string")

        salt = cls.master_key_salt(user_name)
        with SecretBuffer.from_text(master_password, field="Master password") as password_bytes:
            key = CryptoUtils.scrypt(
                password_bytes.view(),
                salt,
                length=Constants.MASTER_KEY_SIZE_BYTES(),
            )

        logger.debug("Master key derived", extra={
            "user_name_length": len(salt) - len(CryptoUtils.scheme_tag()) - Constants.UINT32_SIZE_BYTES(),
            "event": "master_key_derived",
        })
        return SecretBuffer(key)

    @classmethod
    def derive_template_seed(
        cls,
        master_key: SecretLike,
        site_name: str,
        counter: int = Constants.DEFAULT_COUNTER(),
    ) -> SecretBuffer:
        """Derive the 32-byte template seed for a site.

        Args:
            master_key: 64-byte master key
            site_name: Site identifier
            counter: Rotation counter (unsigned 32-bit, default 1)

        Returns:
            SecretBuffer holding the 32-byte seed

        Raises:
            InputError: If the key size, site name or counter is invalid
        """
        key = cls._as_view(master_key, field="Master key")
        if len(key) != Constants.MASTER_KEY_SIZE_BYTES():
            raise InputError(
                f"Master key must be exactly {Constants.MASTER_KEY_SIZE_BYTES()} bytes, got {len(key)}"
            )

        message = cls.seed_message(site_name, counter)
        seed = CryptoUtils.hmac_sha256(key, message)

        logger.debug("Template seed derived", extra={
            "counter": counter,
            "event": "template_seed_derived",
        })
        return SecretBuffer(seed)

    @classmethod
    def select_template(cls, seed: SecretLike, password_type: PasswordType) -> str:
        """Pick the template for ``password_type`` using the first seed byte.

        Raises:
            ConfigurationError: If the password type has no templates
            InputError: If the seed is empty
        """
        templates = Tables.templates_for(password_type)
        seed_bytes = cls._as_view(seed, field="Seed")
        if len(seed_bytes) == 0:
            raise InputError("Seed cannot be empty")
        return templates[seed_bytes[0] % len(templates)]

    @classmethod
    def render_password(cls, seed: SecretLike, password_type: PasswordType) -> str:
        """Render the site password from a template seed.

        Args:
            seed: Template seed (at least template length + 1 bytes)
            password_type: Password type selecting the template list

        Returns:
            Generated password

        Raises:
            ConfigurationError: If the type or a template symbol is unmapped
            InputError: If the seed is too short for the chosen template
        """
        template = cls.select_template(seed, password_type)
        seed_bytes = cls._as_view(seed, field="Seed")
        if len(seed_bytes) < len(template) + 1:
            raise InputError(
                f"Seed must be at least {len(template) + 1} bytes for this template, got {len(seed_bytes)}"
            )

        characters = []
        for i, symbol in enumerate(template):
            group = Tables.character_group(symbol)
            characters.append(group[seed_bytes[i + 1] % len(group)])

        return "".join(characters)

    @classmethod
    def generate_password(
        cls,
        user_name: str,
        master_password: str,
        site_name: str,
        counter: int = Constants.DEFAULT_COUNTER(),
        password_type: PasswordType = PasswordType.LONG,
    ) -> str:
        """Run the whole pipeline for one site, wiping intermediate secrets.

        Returns:
            Generated password
        """
        # Fail on bad site inputs before paying for scrypt.
        Tables.templates_for(password_type)
        cls.seed_message(site_name, counter)

        with cls.derive_master_key(user_name, master_password) as master_key:
            with cls.derive_template_seed(master_key, site_name, counter) as seed:
                return cls.render_password(seed, password_type)


derive_master_key = MasterPasswordAlgorithm.derive_master_key
derive_template_seed = MasterPasswordAlgorithm.derive_template_seed
render_password = MasterPasswordAlgorithm.render_password
generate_password = MasterPasswordAlgorithm.generate_password
