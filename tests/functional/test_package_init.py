"""Tests for the package __init__.py module."""

import unittest

import splurge_master_password
from splurge_master_password import (
    MasterPasswordAlgorithm,
    MasterPasswordError,
    MasterPasswordSession,
    PasswordType,
    SecretBuffer,
    SiteService,
    Tables,
    ValidationError,
    __version__,
    generate_password,
)


class TestInit(unittest.TestCase):
    """Test cases for the __init__.py module."""

    def test_imports(self):
        """Test that the public names can be imported."""
        self.assertIsNotNone(MasterPasswordAlgorithm)
        self.assertIsNotNone(MasterPasswordSession)
        self.assertIsNotNone(SiteService)
        self.assertIsNotNone(SecretBuffer)
        self.assertIsNotNone(Tables)
        self.assertTrue(callable(generate_password))

    def test_all_names_exist(self):
        """Test that every name in __all__ is exported."""
        for name in splurge_master_password.__all__:
            self.assertTrue(hasattr(splurge_master_password, name), name)

    def test_exception_hierarchy(self):
        """Test that exported exceptions share the base class."""
        self.assertTrue(issubclass(ValidationError, MasterPasswordError))

    def test_version(self):
        """Test that __version__ is a string."""
        self.assertIsInstance(__version__, str)
        self.assertTrue(__version__)

    def test_tables_are_consistent(self):
        """Test the table self-check."""
        Tables.verify()
        self.assertEqual(len(list(PasswordType)), 6)


if __name__ == "__main__":
    unittest.main()
