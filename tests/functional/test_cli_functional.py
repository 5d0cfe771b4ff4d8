"""Functional tests for CLI module using actual subprocess calls."""

import os
import unittest

from tests.test_utility import TestDataHelper, TestUtilities


class TestCLIFunctional(unittest.TestCase):
    """Functional tests for CLI using actual subprocess calls."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = TestUtilities.create_temp_data_dir()
        self.config_file = os.path.join(self.temp_dir, "sites.json")

    def tearDown(self):
        """Clean up test fixtures."""
        TestUtilities.cleanup_temp_dir(self.temp_dir)

    def run_cli_command(self, args: list, env: dict | None = None) -> dict:
        """Run a CLI command against the temporary site list."""
        return TestUtilities.run_cli_command(["-f", self.config_file] + args, env=env)

    def test_generate_reference_password(self):
        """Test generating the published reference password."""
        result = self.run_cli_command([
            "-u", TestDataHelper.REFERENCE_USER_NAME,
            "-p", TestDataHelper.REFERENCE_MASTER_PASSWORD,
            "generate",
            "-s", TestDataHelper.REFERENCE_SITE_NAME,
        ])

        self.assertTrue(result["success"])
        self.assertEqual(result["password"], "Jejr5[RepuSosp")
        self.assertEqual(result["password_type"], "LongPassword")

    def test_generate_with_env_password(self):
        """Test reading the master password from an environment variable."""
        env = dict(os.environ)
        env["SMP_TEST_MASTER_PASSWORD"] = TestDataHelper.REFERENCE_MASTER_PASSWORD

        result = self.run_cli_command([
            "-u", TestDataHelper.REFERENCE_USER_NAME,
            "-ep", "SMP_TEST_MASTER_PASSWORD",
            "generate",
            "-s", TestDataHelper.REFERENCE_SITE_NAME,
            "-t", "PIN",
        ], env=env)

        self.assertEqual(result["password"], "7662")

    def test_stored_site_workflow(self):
        """Test storing the user name and a site, then generating from it."""
        self.assertTrue(self.run_cli_command(["user", "-n", TestDataHelper.REFERENCE_USER_NAME])["success"])
        added = self.run_cli_command([
            "add",
            "-s", TestDataHelper.REFERENCE_SITE_NAME,
            "-l", "rlm@example.com",
            "-t", "MaximumSecurityPassword",
        ])
        self.assertEqual(added["site"]["password_type"], "MaximumSecurityPassword")

        listed = self.run_cli_command(["list"])
        self.assertEqual(listed["user_name"], TestDataHelper.REFERENCE_USER_NAME)
        self.assertEqual(listed["count"], 1)

        result = self.run_cli_command([
            "-p", TestDataHelper.REFERENCE_MASTER_PASSWORD,
            "site",
            "-s", TestDataHelper.REFERENCE_SITE_NAME,
        ])
        self.assertEqual(result["login"], "rlm@example.com")
        self.assertEqual(result["password"], "W6@692^B1#&@gVdSdLZ@")

    def test_error_output(self):
        """Test that failures are reported as JSON on stderr."""
        result = self.run_cli_command([
            "-u", TestDataHelper.REFERENCE_USER_NAME,
            "generate",
            "-s", TestDataHelper.REFERENCE_SITE_NAME,
        ])

        self.assertFalse(result["success"])
        self.assertEqual(result["error_code"], "validation_error")

    def test_invalid_environment_default(self):
        """Test that a bad SMP_PASSWORD_TYPE gives a JSON error, not a traceback."""
        env = dict(os.environ)
        env["SMP_PASSWORD_TYPE"] = "bogus"

        result = self.run_cli_command(["types"], env=env)

        self.assertFalse(result["success"])
        self.assertEqual(result["error_code"], "validation_error")

    def test_types(self):
        """Test listing the password types."""
        result = self.run_cli_command(["types"])
        names = [item["name"] for item in result["types"]]
        self.assertEqual(
            names,
            [
                "MaximumSecurityPassword",
                "LongPassword",
                "MediumPassword",
                "ShortPassword",
                "BasicPassword",
                "PIN",
            ],
        )


if __name__ == "__main__":
    unittest.main()
