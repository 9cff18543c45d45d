"""Command line to manage project permissions.

Usage:
    python -m permissions_sdk create --project-id p1 --group-id g1 --capability-name Read --capability-mode Allow
    python -m permissions_sdk read --id p1:g1::Read:Allow
    python -m permissions_sdk delete --id p1:g1::Read:Allow
    python -m permissions_sdk import p1:g1::Read:Allow
    python -m permissions_sdk list --project-id p1

Settings are read from environment variables, `config.yml` or `.env`
(see `permissions_sdk.settings.PermissionsSettings`).
"""

import argparse
import json
import logging
import sys

from permissions_sdk.client import PermissionsClient
from permissions_sdk.exceptions import ConfigError, DataRetrievalError, UseCaseError
from permissions_sdk.identifier import decode_identifier, encode_identifier
from permissions_sdk.models import Capability, DeclaredGrant, grantee_from_ids
from permissions_sdk.reconcilers import (
    ProjectPermissionReconciler,
    ProjectPermissionsReader,
)
from permissions_sdk.settings import PermissionsSettings

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _add_grant_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--id",
        dest="identifier",
        help="Compound identifier `project_id:group_id:user_id:capability_name:capability_mode`.",
    )
    parser.add_argument("--project-id")
    grantee = parser.add_mutually_exclusive_group()
    grantee.add_argument("--group-id")
    grantee.add_argument("--user-id")
    parser.add_argument("--capability-name", choices=["Read", "Write"])
    parser.add_argument("--capability-mode", choices=["Allow", "Deny"])


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="permissions_sdk",
        description="Manage the permissions of projects.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("create", "Grant a capability on a project."),
        ("read", "Check a grant is present on a project."),
        ("delete", "Remove a grant from a project."),
    ):
        _add_grant_arguments(commands.add_parser(command, help=help_text))

    import_parser = commands.add_parser(
        "import", help="Decode an identifier and check the grant exists."
    )
    import_parser.add_argument("identifier")

    list_parser = commands.add_parser(
        "list", help="List the grantee capabilities of a project."
    )
    list_parser.add_argument("--project-id", required=True)
    return parser


def grant_from_args(args: argparse.Namespace) -> DeclaredGrant:
    """Build the declared grant from either `--id` or the individual arguments."""
    options = {
        "--project-id": args.project_id,
        "--group-id": args.group_id,
        "--user-id": args.user_id,
        "--capability-name": args.capability_name,
        "--capability-mode": args.capability_mode,
    }
    if args.identifier:
        given = [option for option, value in options.items() if value]
        if given:
            raise ConfigError(f"--id cannot be combined with {', '.join(given)}")
        return decode_identifier(args.identifier)

    missing = [
        option
        for option in ("--project-id", "--capability-name", "--capability-mode")
        if not options[option]
    ]
    if not (args.group_id or args.user_id):
        missing.append("--group-id or --user-id")
    if missing:
        raise ConfigError(f"Missing arguments: {', '.join(missing)} (or use --id)")
    return DeclaredGrant.for_grantee(
        args.project_id,
        grantee_from_ids(args.group_id, args.user_id),
        Capability(name=args.capability_name, mode=args.capability_mode),
    )


def run(args: argparse.Namespace, settings: PermissionsSettings) -> str:
    """Run a command and return what it prints."""
    if args.command == "list":
        with PermissionsClient.from_settings(settings) as client:
            entries = ProjectPermissionsReader(client).list(args.project_id)
        return json.dumps(
            [
                entry.model_dump(mode="json", by_alias=True, exclude_none=True)
                for entry in entries
            ],
            indent=2,
        )

    with PermissionsClient.from_settings(settings) as client:
        reconciler = ProjectPermissionReconciler(
            client,
            ignore_missing_on_delete=settings.reconciler.ignore_missing_on_delete,
        )
        if args.command == "import":
            grant = reconciler.import_state(args.identifier)
            return grant.model_dump_json(indent=2)

        grant = grant_from_args(args)
        if args.command == "create":
            reconciler.create(grant)
        elif args.command == "read":
            reconciler.read(grant)
        elif args.command == "delete":
            reconciler.delete(grant)
    return encode_identifier(grant)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint of the command line."""
    args = build_parser().parse_args(argv)
    try:
        settings = PermissionsSettings()
        logging.basicConfig(level=LOG_LEVELS[settings.reconciler.log_level])
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        print(run(args, settings))
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except (DataRetrievalError, UseCaseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
