"""Tests for the password_service module."""

import unittest
from unittest.mock import patch

from splurge_master_password.algorithm import derive_template_seed, render_password
from splurge_master_password.crypto_utils import CryptoUtils
from splurge_master_password.exceptions import InputError, MasterKeyError
from splurge_master_password.services.password_service import MasterPasswordSession
from splurge_master_password.tables import PasswordType
from tests.test_utility import TestDataHelper, TestUtilities


class TestMasterPasswordSession(unittest.TestCase):
    """Test cases for the MasterPasswordSession class."""

    def expected(self, site_name, counter, password_type):
        with derive_template_seed(TestDataHelper.FIXED_MASTER_KEY, site_name, counter) as seed:
            return render_password(seed, password_type)

    def test_derives_master_key_once(self):
        """Test that several sites share one scrypt run."""
        with TestUtilities.fast_scrypt() as mock_scrypt:
            with MasterPasswordSession("John Doe", "secret") as session:
                first = session.password_for("ebay.com", 3, PasswordType.LONG)
                second = session.password_for("ripeyesteaks.com", 1, PasswordType.PIN)

        mock_scrypt.assert_called_once()
        self.assertEqual(first, self.expected("ebay.com", 3, PasswordType.LONG))
        self.assertEqual(second, self.expected("ripeyesteaks.com", 1, PasswordType.PIN))

    def test_defaults(self):
        """Test default counter and password type."""
        with TestUtilities.fast_scrypt():
            with MasterPasswordSession("John Doe", "secret") as session:
                password = session.password_for("example.com")

        self.assertEqual(password, self.expected("example.com", 1, PasswordType.LONG))
        self.assertEqual(len(password), 14)

    def test_template_seed_is_owned_by_caller(self):
        """Test direct seed access."""
        with TestUtilities.fast_scrypt():
            with MasterPasswordSession("John Doe", "secret") as session:
                with session.template_seed("example.com", 2) as seed:
                    self.assertEqual(len(seed), 32)

    def test_close_wipes_key(self):
        """Test that closing the session zeroes the master key."""
        with TestUtilities.fast_scrypt():
            session = MasterPasswordSession("John Doe", "secret")
        key_bytes = session._master_key._data

        session.close()

        self.assertFalse(session.is_open)
        self.assertEqual(bytes(key_bytes), bytes(64))
        session.close()

    def test_closed_session(self):
        """Test that a closed session cannot generate passwords."""
        with TestUtilities.fast_scrypt():
            with MasterPasswordSession("John Doe", "secret") as session:
                pass

        with self.assertRaises(MasterKeyError):
            session.password_for("example.com")

    def test_accepts_same_inputs_as_derive_master_key(self):
        """Test that an empty master password derives a key like the core does."""
        with TestUtilities.fast_scrypt() as mock_scrypt:
            with MasterPasswordSession("John Doe", "") as session:
                password = session.password_for("example.com")

        mock_scrypt.assert_called_once()
        self.assertEqual(password, self.expected("example.com", 1, PasswordType.LONG))

    def test_invalid_master_password(self):
        """Test that a non-text master password is an input error."""
        with patch.object(CryptoUtils, "scrypt") as mock_scrypt:
            with self.assertRaises(InputError):
                MasterPasswordSession("John Doe", None)
            with self.assertRaises(InputError):
                MasterPasswordSession("John Doe", "bad\udcff")

        mock_scrypt.assert_not_called()

    def test_repr_hides_key(self):
        """Test that repr shows state only."""
        with TestUtilities.fast_scrypt():
            with MasterPasswordSession("John Doe", "secret") as session:
                self.assertEqual(repr(session), "MasterPasswordSession(open=True)")


if __name__ == "__main__":
    unittest.main()
