#!/usr/bin/env python3
"""Command-line interface for the Splurge Master Password system."""

import argparse
import json
import logging
import os
import sys
from typing import Any, Optional

from splurge_master_password.config import MasterPasswordConfig
from splurge_master_password.exceptions import (
    ConfigurationError,
    FileOperationError,
    MasterKeyError,
    ValidationError,
)
from splurge_master_password.file_manager import FileManager
from splurge_master_password.services import MasterPasswordSession, SiteService
from splurge_master_password.tables import PasswordType, Tables


class MasterPasswordCLI:
    """Command-line interface for the Master Password system."""

    def __init__(self, config: MasterPasswordConfig | None = None) -> None:
        """Initialize the CLI.

        Args:
            config: CLI defaults (read from the environment on first run if omitted)
        """
        self._config = config
        self._parser: argparse.ArgumentParser | None = None
        self._pretty = False

    def _get_parser(self) -> argparse.ArgumentParser:
        if self._parser is None:
            if self._config is None:
                self._config = MasterPasswordConfig()
            self._parser = self._create_parser()
        return self._parser

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser.

        Returns:
            Configured argument parser
        """
        type_choices = ", ".join(member.value for member in PasswordType)

        parser = argparse.ArgumentParser(
            prog="splurge-master-password",
            description="Splurge Master Password - Stateless site password generation",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Generate a password for a site
  splurge-master-password -u "Robert Lee Mitchell" -p "banana colored duckling" \\
    generate -s masterpasswordapp.com

  # Generate a new password for the same site (rotate the counter)
  splurge-master-password -u "Robert Lee Mitchell" -ep SMP_MASTER_PASSWORD \\
    generate -s masterpasswordapp.com -c 2 -t MaximumSecurityPassword

  # Store site metadata and the user name in the site list
  splurge-master-password user -n "Robert Lee Mitchell"
  splurge-master-password add -s ebay.com -l jdoe@example.com -c 3 -t LongPassword

  # Generate the password of a stored site
  splurge-master-password -ep SMP_MASTER_PASSWORD site -s ebay.com

  # List stored sites and available password types
  splurge-master-password list
  splurge-master-password types
            """,
        )

        # Global arguments
        parser.add_argument(
            "-u",
            "--username",
            help="User name for master key derivation (default: user name in the site list)",
        )
        parser.add_argument(
            "-p",
            "--password",
            help="Master password",
        )
        parser.add_argument(
            "-ep",
            "--env-password",
            help="Environment variable containing the master password",
        )
        parser.add_argument(
            "-f",
            "--config-file",
            default=self._config.config_file,
            help="Site list file (default: platform config dir)",
        )
        parser.add_argument(
            "--pretty",
            action="store_true",
            help="Pretty-print JSON outputs",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log debug events to stderr",
        )

        subparsers = parser.add_subparsers(
            dest="command",
            help="Available commands",
        )

        # Generate command
        generate_parser = subparsers.add_parser(
            "generate",
            help="Generate a password for any site",
        )
        generate_parser.add_argument(
            "-s",
            "--site",
            required=True,
            help="Site name",
        )
        generate_parser.add_argument(
            "-c",
            "--counter",
            type=int,
            default=self._config.default_counter,
            help=f"Site counter (default: {self._config.default_counter})",
        )
        generate_parser.add_argument(
            "-t",
            "--type",
            default=self._config.default_password_type.value,
            help=f"Password type: {type_choices} (default: {self._config.default_password_type.value})",
        )

        # Site command
        site_parser = subparsers.add_parser(
            "site",
            help="Generate the password of a stored site",
        )
        site_parser.add_argument(
            "-s",
            "--site",
            required=True,
            help="Stored site name",
        )

        # Add command
        add_parser = subparsers.add_parser(
            "add",
            help="Add a site to the site list",
        )
        add_parser.add_argument(
            "-s",
            "--site",
            required=True,
            help="Site name",
        )
        add_parser.add_argument(
            "-l",
            "--login",
            default="",
            help="Login name used on the site",
        )
        add_parser.add_argument(
            "-c",
            "--counter",
            type=int,
            default=self._config.default_counter,
            help=f"Site counter (default: {self._config.default_counter})",
        )
        add_parser.add_argument(
            "-t",
            "--type",
            default=self._config.default_password_type.value,
            help=f"Password type: {type_choices}",
        )

        # Update command
        update_parser = subparsers.add_parser(
            "update",
            help="Update a stored site",
        )
        update_parser.add_argument(
            "-s",
            "--site",
            required=True,
            help="Stored site name",
        )
        update_parser.add_argument(
            "-l",
            "--login",
            help="New login name",
        )
        update_parser.add_argument(
            "-c",
            "--counter",
            type=int,
            help="New site counter",
        )
        update_parser.add_argument(
            "-t",
            "--type",
            help=f"New password type: {type_choices}",
        )

        # Remove command
        remove_parser = subparsers.add_parser(
            "remove",
            help="Remove a site from the site list",
        )
        remove_parser.add_argument(
            "-s",
            "--site",
            required=True,
            help="Stored site name",
        )

        # User command
        user_parser = subparsers.add_parser(
            "user",
            help="Store the user name in the site list",
        )
        user_parser.add_argument(
            "-n",
            "--name",
            required=True,
            help="User name",
        )

        # List command
        subparsers.add_parser(
            "list",
            help="List stored sites",
        )

        # Types command
        subparsers.add_parser(
            "types",
            help="List password types and their templates",
        )

        # Config-file command
        subparsers.add_parser(
            "config-file",
            help="Print the site list path that will be used",
        )

        return parser

    def _site_service(self, config_file: str) -> SiteService:
        return SiteService(FileManager(config_file))

    def _resolve_master_password(
        self,
        *,
        password: str | None,
        env_password: str | None
    ) -> str:
        """Resolve the master password from the arguments or the environment.

        Raises:
            ValidationError: If none or both sources are given, or the variable is unset
        """
        if password and env_password:
            raise ValidationError(
                "Cannot specify both password and environment password"
            )

        if env_password:
            if env_password.strip() == "":
                raise ValidationError("Environment variable name cannot be empty")
            value = os.getenv(env_password)
            if value is None:
                raise ValidationError(f"Environment variable {env_password} not set")
            if value == "":
                raise ValidationError(f"Environment variable {env_password} is empty")
            return value

        if not password:
            raise ValidationError(
                "Either password (-p/--password) or environment password "
                "(-ep/--env-password) is required"
            )
        return password

    def _resolve_user_name(self, *, username: str | None, config_file: str) -> str:
        """Use the given user name, falling back to the one in the site list.

        Raises:
            ValidationError: If no user name is available
        """
        if username is not None:
            return username

        stored = self._site_service(config_file).load().user_name
        if not stored:
            raise ValidationError(
                "User name (-u/--username) is required when the site list has none"
            )
        return stored

    def _check_input_length(self, value: str | None, *, field: str) -> None:
        if value is not None and len(value) > self._config.max_input_length:
            raise ValidationError(
                f"{field} is too long (max {self._config.max_input_length} characters)"
            )

    def _print_json(self, payload: dict[str, Any]) -> None:
        """Print a JSON payload to stdout."""
        print(json.dumps(payload, indent=2 if self._pretty else None, ensure_ascii=False))

    def _print_error(self, *, message: str, code: str = "error", extra: dict[str, Any] | None = None) -> None:
        """Print a JSON error to stderr and exit non-zero."""
        error_obj = {
            "success": False,
            "error_code": code,
            "message": message,
        }
        if extra:
            error_obj["data"] = extra
        print(json.dumps(error_obj, indent=2), file=sys.stderr)
        sys.exit(1)

    def _handle_generate(self, args: argparse.Namespace) -> None:
        """Handle generate command."""
        self._handle_generate_with_dependencies(
            site_name=args.site,
            counter=args.counter,
            password_type=args.type,
            username=args.username,
            password=args.password,
            env_password=args.env_password,
            config_file=args.config_file,
        )

    def _handle_generate_with_dependencies(
        self,
        *,
        site_name: str,
        counter: int,
        password_type: str,
        username: str | None,
        password: str | None,
        env_password: str | None,
        config_file: str
    ) -> None:
        """Handle generate command with explicit dependencies.

        Args:
            site_name: Site name
            counter: Site counter
            password_type: Password type name
            username: User name (optional, falls back to the site list)
            password: Master password
            env_password: Environment variable name containing master password
            config_file: Site list file
        """
        self._check_input_length(site_name, field="Site name")
        parsed_type = PasswordType.parse(password_type)
        user_name = self._resolve_user_name(username=username, config_file=config_file)
        master_password = self._resolve_master_password(
            password=password,
            env_password=env_password
        )

        with MasterPasswordSession(user_name, master_password) as session:
            generated = session.password_for(site_name, counter, parsed_type)

        self._print_json({
            "success": True,
            "command": "generate",
            "site_name": site_name,
            "counter": counter,
            "password_type": parsed_type.value,
            "password": generated,
        })

    def _handle_site(self, args: argparse.Namespace) -> None:
        """Handle site command."""
        self._handle_site_with_dependencies(
            site_name=args.site,
            username=args.username,
            password=args.password,
            env_password=args.env_password,
            config_file=args.config_file,
        )

    def _handle_site_with_dependencies(
        self,
        *,
        site_name: str,
        username: str | None,
        password: str | None,
        env_password: str | None,
        config_file: str
    ) -> None:
        """Handle site command with explicit dependencies.

        Args:
            site_name: Stored site name
            username: User name (optional, falls back to the site list)
            password: Master password
            env_password: Environment variable name containing master password
            config_file: Site list file
        """
        service = self._site_service(config_file)
        site = service.get_site(site_name)
        user_name = self._resolve_user_name(username=username, config_file=config_file)
        master_password = self._resolve_master_password(
            password=password,
            env_password=env_password
        )

        with MasterPasswordSession(user_name, master_password) as session:
            generated = service.generate_for_site(session, site_name)

        self._print_json({
            "success": True,
            "command": "site",
            "site_name": site.site_name,
            "login": site.login,
            "counter": site.counter,
            "password_type": site.password_type.value,
            "password": generated,
        })

    def _handle_add(self, args: argparse.Namespace) -> None:
        """Handle add command."""
        self._check_input_length(args.site, field="Site name")
        self._check_input_length(args.login, field="Login")
        site = self._site_service(args.config_file).add_site(
            args.site,
            login=args.login,
            counter=args.counter,
            password_type=args.type,
        )
        self._print_json({
            "success": True,
            "command": "add",
            "site": site.to_dict(),
        })

    def _handle_update(self, args: argparse.Namespace) -> None:
        """Handle update command."""
        self._check_input_length(args.login, field="Login")
        site = self._site_service(args.config_file).update_site(
            args.site,
            login=args.login,
            counter=args.counter,
            password_type=args.type,
        )
        self._print_json({
            "success": True,
            "command": "update",
            "site": site.to_dict(),
        })

    def _handle_remove(self, args: argparse.Namespace) -> None:
        """Handle remove command."""
        self._site_service(args.config_file).remove_site(args.site)
        self._print_json({
            "success": True,
            "command": "remove",
            "site_name": args.site,
        })

    def _handle_user(self, args: argparse.Namespace) -> None:
        """Handle user command."""
        self._check_input_length(args.name, field="User name")
        self._site_service(args.config_file).set_user_name(args.name)
        self._print_json({
            "success": True,
            "command": "user",
            "user_name": args.name,
        })

    def _handle_list(self, args: argparse.Namespace) -> None:
        """Handle list command."""
        configuration = self._site_service(args.config_file).load()
        self._print_json({
            "success": True,
            "command": "list",
            "user_name": configuration.user_name,
            "count": len(configuration.sites),
            "sites": [site.to_dict() for site in configuration.sites],
        })

    def _handle_types(self) -> None:
        """Handle types command."""
        types = []
        for password_type in PasswordType:
            templates = Tables.templates_for(password_type)
            types.append({
                "name": password_type.value,
                "templates": len(templates),
                "length": len(templates[0]),
            })
        self._print_json({
            "success": True,
            "command": "types",
            "types": types,
        })

    def _configure_logging(self, verbose: bool) -> None:
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                stream=sys.stderr,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            )

    def run(self, args: Optional[list[str]] = None) -> None:
        """Run the CLI with given arguments."""
        try:
            parsed_args = self._get_parser().parse_args(args)
            self._pretty = bool(getattr(parsed_args, "pretty", False))
            self._configure_logging(bool(getattr(parsed_args, "verbose", False)))

            if not parsed_args.command:
                self._print_error(message="No command specified", code="missing_command")

            if parsed_args.command == "generate":
                self._handle_generate(parsed_args)
            elif parsed_args.command == "site":
                self._handle_site(parsed_args)
            elif parsed_args.command == "add":
                self._handle_add(parsed_args)
            elif parsed_args.command == "update":
                self._handle_update(parsed_args)
            elif parsed_args.command == "remove":
                self._handle_remove(parsed_args)
            elif parsed_args.command == "user":
                self._handle_user(parsed_args)
            elif parsed_args.command == "list":
                self._handle_list(parsed_args)
            elif parsed_args.command == "types":
                self._handle_types()
            elif parsed_args.command == "config-file":
                self._print_json({
                    "success": True,
                    "command": "config-file",
                    "config_file": parsed_args.config_file,
                })
            else:
                self._print_error(message=f"Unknown command: {parsed_args.command}", code="unknown_command")

        except ValidationError as e:
            self._print_error(message=str(e), code="validation_error")
        except ConfigurationError as e:
            self._print_error(message=str(e), code="configuration_error")
        except FileOperationError as e:
            self._print_error(message=str(e), code="file_error")
        except MasterKeyError as e:
            self._print_error(message=str(e), code="master_key_error")
        except KeyboardInterrupt:
            self._print_error(message="Operation cancelled by user", code="cancelled")
        except Exception as e:
            self._print_error(message=str(e), code="unexpected_error")


def main() -> None:
    """Main entry point for the CLI."""
    cli = MasterPasswordCLI()
    cli.run()


if __name__ == "__main__":
    main()
