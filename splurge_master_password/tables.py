"""Password types, templates and character groups.

Each password type owns an ordered list of templates. Every symbol of a
template names a character group, and the template length is the length
of the generated password. The tables are part of the published algorithm
and must be reproduced verbatim.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from splurge_master_password.exceptions import ConfigurationError, ValidationError


class PasswordType(Enum):
    """Closed set of password types."""

    MAXIMUM = "MaximumSecurityPassword"
    LONG = "LongPassword"
    MEDIUM = "MediumPassword"
    SHORT = "ShortPassword"
    BASIC = "BasicPassword"
    PIN = "PIN"

    @classmethod
    def parse(cls, value: "str | PasswordType") -> "PasswordType":
        """Parse a password type from its value or member name, ignoring case.

        Args:
            value: Value such as "LongPassword", "LONG" or "long"

        Returns:
            Matching PasswordType

        Raises:
            ValidationError: If the value names no password type
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValidationError("Password type must be a string")

        wanted = value.strip().lower()
        for member in cls:
            if wanted in (member.value.lower(), member.name.lower()):
                return member

        choices = ", ".join(member.value for member in cls)
        raise ValidationError(f"Unknown password type '{value}' (choose from: {choices})")


class Tables:
    """Read-only template and character group tables."""

    _TEMPLATES: Mapping[PasswordType, tuple[str, ...]] = MappingProxyType({
        PasswordType.MAXIMUM: (
            "anoxxxxxxxxxxxxxxxxx",
            "axxxxxxxxxxxxxxxxxno",
        ),
        PasswordType.LONG: (
            "CvcvnoCvcvCvcv",
            "CvcvCvcvnoCvcv",
            "CvcvCvcvCvcvno",
            "CvccnoCvcvCvcv",
            "CvccCvcvnoCvcv",
            "CvccCvcvCvcvno",
            "CvcvnoCvccCvcv",
            "CvcvCvccnoCvcv",
            "CvcvCvccCvcvno",
            "CvcvnoCvcvCvcc",
            "CvcvCvcvnoCvcc",
            "CvcvCvcvCvccno",
            "CvccnoCvccCvcv",
            "CvccCvccnoCvcv",
            "CvccCvccCvcvno",
            "CvcvnoCvccCvcc",
            "CvcvCvccnoCvcc",
            "CvcvCvccCvccno",
            "CvccnoCvcvCvcc",
            "CvccCvcvnoCvcc",
            "CvccCvcvCvccno",
        ),
        PasswordType.MEDIUM: (
            "CvcnoCvc",
            "CvcCvcno",
        ),
        PasswordType.SHORT: (
            "Cvcn",
        ),
        PasswordType.BASIC: (
            "aaanaaan",
            "aannaaan",
            "aaannaaa",
        ),
        PasswordType.PIN: (
            "nnnn",
        ),
    })

    _CHARACTER_GROUPS: Mapping[str, str] = MappingProxyType({
        "V": "AEIOU",
        "C": "BCDFGHJKLMNPQRSTVWXYZ",
        "v": "aeiou",
        "c": "bcdfghjklmnpqrstvwxyz",
        "A": "AEIOUBCDFGHJKLMNPQRSTVWXYZ",
        "a": "AEIOUaeiouBCDFGHJKLMNPQRSTVWXYZbcdfghjklmnpqrstvwxyz",
        "n": "0123456789",
        "o": "@&%?,=[]_:-+*$#!'^~;()/.",
        # Published text says "X"; every implementation uses lowercase "x".
        "x": "AEIOUaeiouBCDFGHJKLMNPQRSTVWXYZbcdfghjklmnpqrstvwxyz0123456789!@#$%^&*()",
    })

    @classmethod
    def templates_for(cls, password_type: PasswordType) -> tuple[str, ...]:
        """Get the ordered templates for a password type.

        Args:
            password_type: Password type to look up

        Returns:
            Tuple of templates

        Raises:
            ConfigurationError: If the type has no templates
        """
        templates = cls._TEMPLATES.get(password_type) if isinstance(password_type, PasswordType) else None
        if not templates:
            raise ConfigurationError(f"No templates defined for password type: {password_type!r}")
        return templates

    @classmethod
    def character_group(cls, symbol: str) -> str:
        """Get the character group bound to a template symbol.

        Args:
            symbol: Single template symbol

        Returns:
            Ordered character set

        Raises:
            ConfigurationError: If the symbol has no character group
        """
        group = cls._CHARACTER_GROUPS.get(symbol)
        if not group:
            raise ConfigurationError(f"No character group defined for template symbol: {symbol!r}")
        return group

    @classmethod
    def password_types(cls) -> tuple[PasswordType, ...]:
        return tuple(cls._TEMPLATES.keys())

    @classmethod
    def symbols(cls) -> tuple[str, ...]:
        return tuple(cls._CHARACTER_GROUPS.keys())

    @classmethod
    def max_template_length(cls) -> int:
        return max(len(t) for templates in cls._TEMPLATES.values() for t in templates)

    @classmethod
    def verify(cls) -> None:
        """Check that every password type and template symbol is mapped.

        Raises:
            ConfigurationError: If any type or symbol is missing
        """
        for password_type in PasswordType:
            for template in cls.templates_for(password_type):
                for symbol in template:
                    cls.character_group(symbol)
