"""Tests for the validation_utils module."""

import unittest

from splurge_master_password.exceptions import InputError, ValidationError
from splurge_master_password.validation_utils import (
    validate_counter,
    validate_site_name,
)


class TestValidationUtils(unittest.TestCase):
    """Test cases for the validation utilities."""

    def test_valid_counters(self):
        """Test the full unsigned 32-bit range."""
        for counter in (0, 1, 2, 65536, 4294967295):
            validate_counter(counter)

    def test_invalid_counters(self):
        """Test values outside the range or of the wrong type."""
        for counter in (-1, 4294967296, 1.5, "1", None, False):
            with self.assertRaises(InputError):
                validate_counter(counter)

    def test_input_error_is_validation_error(self):
        """Test that input errors can be caught as validation errors."""
        with self.assertRaises(ValidationError):
            validate_counter(-1)

    def test_valid_site_names(self):
        """Test typical site names."""
        for name in ("ebay.com", "bücher.de", "My Bank", "a"):
            validate_site_name(name)

    def test_invalid_site_names(self):
        """Test unusable site names."""
        for name in (None, "", "   ", "bad\x00name", "x" * 1001, 42):
            with self.assertRaises(ValidationError):
                validate_site_name(name)


if __name__ == "__main__":
    unittest.main()
