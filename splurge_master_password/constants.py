"""Library-wide constants.

These constants are fixed by the published Master Password algorithm.
Changing any of them breaks compatibility with every other implementation,
so they are exposed read-only and never through configuration.
"""


class Constants:

    # Protocol
    _SCHEME_TAG: str = "com.lyndir.masterpassword"
    _SCRYPT_N: int = 32768
    _SCRYPT_R: int = 8
    _SCRYPT_P: int = 2
    _MASTER_KEY_SIZE_BYTES: int = 64
    _SEED_SIZE_BYTES: int = 32
    _UINT32_SIZE_BYTES: int = 4
    _MAX_UINT32: int = 0xFFFFFFFF

    # Site defaults
    _DEFAULT_COUNTER: int = 1
    _MAX_SITE_NAME_LENGTH: int = 1000

    @classmethod
    def SCHEME_TAG(cls) -> str:
        return cls._SCHEME_TAG

    # scrypt cost parameters
    @classmethod
    def SCRYPT_N(cls) -> int:
        return cls._SCRYPT_N

    @classmethod
    def SCRYPT_R(cls) -> int:
        return cls._SCRYPT_R

    @classmethod
    def SCRYPT_P(cls) -> int:
        return cls._SCRYPT_P

    # Master key size in bytes
    @classmethod
    def MASTER_KEY_SIZE_BYTES(cls) -> int:
        return cls._MASTER_KEY_SIZE_BYTES

    # Template seed size in bytes (HMAC-SHA256 output)
    @classmethod
    def SEED_SIZE_BYTES(cls) -> int:
        return cls._SEED_SIZE_BYTES

    @classmethod
    def UINT32_SIZE_BYTES(cls) -> int:
        return cls._UINT32_SIZE_BYTES

    @classmethod
    def MAX_UINT32(cls) -> int:
        return cls._MAX_UINT32

    @classmethod
    def DEFAULT_COUNTER(cls) -> int:
        return cls._DEFAULT_COUNTER

    @classmethod
    def MAX_SITE_NAME_LENGTH(cls) -> int:
        return cls._MAX_SITE_NAME_LENGTH
