"""csvnest CLI entry points.
This module exposes the upload, report and maintenance commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import sys
from typing import Any, Sequence

from core.config import CsvNestConfig
from core.errors import CsvNestError
from core.logging_config import configure_logging
from core.types import ProcessResult
from report.age_distribution import format_distribution_report
from store.client_sdk import CsvNestClient
from store.database import Database


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="csvnest", description="CSV to nested user records")
    parser.add_argument("--database", help="Override CSVNEST_DATABASE_PATH for this command")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level for structured events",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_process_command(subparsers)
    subparsers.add_parser("distribution", help="Print the age distribution report")
    subparsers.add_parser("users", help="Print stored users as JSON lines")
    subparsers.add_parser("clear", help="Delete all stored users")
    subparsers.add_parser("stats", help="Print the stored user count")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the csvnest CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        client = _build_client(args.database)
        if args.command == "process":
            return _run_process_command(client, args)
        if args.command == "distribution":
            return _run_distribution_command(client)
        if args.command == "users":
            return _run_users_command(client)
        if args.command == "clear":
            return _run_clear_command(client)
        if args.command == "stats":
            return _run_stats_command(client)
    except CsvNestError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(database_path: str | None) -> CsvNestClient:
    """Build SDK client with optional database override.

    Args:
        database_path: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = CsvNestConfig.from_env()
    database = Database(database_path) if database_path else None
    return CsvNestClient(config, database)


def _run_process_command(client: CsvNestClient, args: argparse.Namespace) -> int:
    """Handle process command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = client.process(args.source)
    _print_process_result(result)
    print(format_distribution_report(client.distribution()))
    return 0


def _run_distribution_command(client: CsvNestClient) -> int:
    """Handle distribution command."""
    print(format_distribution_report(client.distribution()))
    return 0


def _run_users_command(client: CsvNestClient) -> int:
    """Handle users command."""
    for user in client.all_records():
        print(json.dumps(asdict(user)))
    return 0


def _run_clear_command(client: CsvNestClient) -> int:
    """Handle clear command."""
    print(f"deleted={client.clear_all()}")
    return 0


def _run_stats_command(client: CsvNestClient) -> int:
    """Handle stats command."""
    print(f"total_users={client.count()}")
    return 0


def _print_process_result(result: ProcessResult) -> None:
    print(f"total_records={result.total_records}")
    print(f"inserted={result.inserted}")
    print(f"failed={result.failed}")
    print(f"processing_time={result.duration_seconds:.2f}s")
    for error in result.errors:
        print(f"error\t{error.identifier}\t{error.message}")


def _add_process_command(subparsers: Any) -> None:
    """Register process subcommand."""
    parser = subparsers.add_parser("process", help="Load a CSV file into the users table")
    parser.add_argument(
        "source",
        nargs="?",
        help="CSV path or s3://bucket/key; defaults to CSVNEST_CSV_PATH",
    )
