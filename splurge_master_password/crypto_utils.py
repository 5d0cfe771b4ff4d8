"""Cryptographic utilities for the Splurge Master Password system."""

import hmac as _hmac

from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from splurge_master_password.constants import Constants
from splurge_master_password.exceptions import InputError, MasterKeyError

BytesLike = Union[bytes, bytearray, memoryview]


class CryptoUtils:
    """Byte encoding and primitive wrappers used by the derivation pipeline."""

    @staticmethod
    def constant_time_compare(a: bytes, b: bytes) -> bool:
        """Perform constant-time comparison of two byte strings.

        Args:
            a: First byte string
            b: Second byte string

        Returns:
            True if strings are equal, False otherwise
        """
        return _hmac.compare_digest(a, b)

    @staticmethod
    def encode_uint32(value: int) -> bytes:
        """Encode an integer as 4 bytes, big-endian, unsigned.

        Args:
            value: Integer in [0, 2**32 - 1]

        Returns:
            4-byte network order encoding

        Raises:
            InputError: If the value is not an int or is out of range
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InputError(f"Expected an integer, got {type(value).__name__}")
        if value < 0 or value > Constants.MAX_UINT32():
            raise InputError(f"Value {value} does not fit in an unsigned 32-bit integer")
        return value.to_bytes(Constants.UINT32_SIZE_BYTES(), byteorder="big", signed=False)

    @classmethod
    def encode_length_prefixed(cls, text: str, *, field: str = "value") -> bytes:
        """Encode text as be32(len(UTF-8(text))) followed by UTF-8(text).

        Args:
            text: Text to encode
            field: Field name used in error messages

        Returns:
            Length-prefixed UTF-8 bytes

        Raises:
            InputError: If text is not a string, holds lone surrogates or its
                encoding is too long
        """
        if not isinstance(text, str):
            raise InputError(f"{field} must be a string")
        try:
            encoded = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InputError(f"{field} is not valid Unicode text") from e
        if len(encoded) > Constants.MAX_UINT32():
            raise InputError(f"{field} is too long to encode ({len(encoded)} bytes)")
        return cls.encode_uint32(len(encoded)) + encoded

    @classmethod
    def scheme_tag(cls) -> bytes:
        """UTF-8 bytes of the scheme tag that prefixes every salt and message."""
        return Constants.SCHEME_TAG().encode("utf-8")

    @staticmethod
    def scrypt(password: BytesLike, salt: bytes, *, length: int) -> bytes:
        """Derive ``length`` bytes with scrypt using the protocol cost parameters.

        Args:
            password: Password bytes
            salt: Salt bytes
            length: Output length in bytes

        Returns:
            Derived bytes

        Raises:
            MasterKeyError: If the KDF cannot run (memory limits or a backend
                without scrypt)
        """
        try:
            kdf = Scrypt(
                salt=salt,
                length=length,
                n=Constants.SCRYPT_N(),
                r=Constants.SCRYPT_R(),
                p=Constants.SCRYPT_P(),
            )
            return kdf.derive(password)
        except (MemoryError, ValueError, UnsupportedAlgorithm) as e:
            raise MasterKeyError(f"Key derivation failed: {e}") from e

    @staticmethod
    def hmac_sha256(key: BytesLike, message: bytes) -> bytes:
        """Compute HMAC-SHA256 of ``message`` under ``key``.

        Args:
            key: HMAC key
            message: Message bytes

        Returns:
            32-byte authentication value
        """
        mac = hmac.HMAC(key, hashes.SHA256())
        mac.update(message)
        return mac.finalize()

    @staticmethod
    def secure_zero(data: bytearray) -> None:
        """Securely zero sensitive data from memory.

        Args:
            data: Data to zero (must be bytearray for in-place modification)
        """
        if data:
            for i in range(len(data)):
                data[i] = 0
