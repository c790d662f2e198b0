# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from postraid.adapters.client import dump_account
from postraid.adapters.sqlalchemy.unit_of_work import startup
from postraid.app import (
    build_reconciliation_engine,
    import_account,
    load_account,
    load_quest_catalog,
    load_scavenger_template,
    reconcile_raid,
    startup_if_needed,
)
from postraid.config import ConfigurationError, configure_logging
from postraid.domain.reconciliation import ReconciliationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile post-raid reports into profiles")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create the profile tables")

    import_profile = subparsers.add_parser(
        "import-profile", help="Store an account document (pmc + scav profiles)"
    )
    import_profile.add_argument("path", type=Path, help="Path to the account JSON document")

    register = subparsers.add_parser("register", help="Record the map a session entered")
    register.add_argument("--session-id", required=True)
    register.add_argument("--location", required=True, help="Map id, e.g. bigmap")

    apply = subparsers.add_parser("apply", help="Reconcile a save-progress request")
    apply.add_argument("--session-id", required=True)
    apply.add_argument("report", type=Path, help="Path to the save-progress request JSON")
    apply.add_argument(
        "--quests",
        type=Path,
        help="Quest definitions JSON used to restore find-item conditions on death",
    )
    apply.add_argument(
        "--scav-template",
        type=Path,
        help="Profile JSON copied as the fresh scavenger when the scavenger dies",
    )

    show = subparsers.add_parser("show", help="Print the stored account document")
    show.add_argument("--session-id", required=True)

    return parser.parse_args(list(argv))


def _run(args: argparse.Namespace) -> int:
    match args.command:
        case "init-db":
            startup()
            print("Database ready")
        case "import-profile":
            account = import_account(args.path)
            print(f"Imported session {account.session_id}")
        case "register":
            startup_if_needed(None)
            build_reconciliation_engine().register_player(args.session_id, args.location)
        case "apply":
            startup_if_needed(None)
            engine = build_reconciliation_engine(
                quests=load_quest_catalog(args.quests),
                scavenger_template=load_scavenger_template(args.scav_template)
                if args.scav_template
                else None,
            )
            result = reconcile_raid(args.session_id, args.report, engine=engine)
            print(
                f"{result.status}: branch={result.branch}, dead={result.is_dead}, "
                f"diagnostics={len(result.diagnostics)}"
            )
            for diagnostic in result.diagnostics:
                print(f"  {diagnostic.kind}: {diagnostic.message}")
        case "show":
            account = load_account(args.session_id)
            if account is None:
                print(f"No profiles for session {args.session_id}", file=sys.stderr)
                return 1
            document = dump_account(account).model_dump(mode="json", by_alias=True)
            print(json.dumps(document, indent=2))
        case _:
            raise ValueError(f"Unknown command: {args.command}")
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO, force=True)

    try:
        exit_code = _run(args)
    except (ConfigurationError, ReconciliationError, ValueError) as exc:
        log.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception as exc:  # noqa: BLE001
        log.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    main()
