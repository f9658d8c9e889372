"""Composition root for the valuecheck command line.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Command selection (check, scenarios, lookup, interactive)
"""

import argparse
import json
import logging
import sys
from typing import Any

from valuecheck.adapters.cli.commands import CLICommandHandler
from valuecheck.adapters.reporting.markdown import MarkdownReportAdapter
from valuecheck.adapters.reporting.stdout import StdoutReportAdapter
from valuecheck.config import Settings, load_settings
from valuecheck.core.contract import ContractChecker
from valuecheck.core.ports import ReportPort


def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface; each line is a command name followed
    by an optional JSON object of arguments.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("valuecheck> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = _execute_cli_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except ValueError as e:
                logger.error(f"Command execution error: {e}")
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Execute a CLI command.

    Raises:
        ValueError: If command is not recognized or a required
            parameter is missing.
    """
    if command == "check":
        return cli_handler.check(
            suite=args.get("suite"),
            verbose=args.get("verbose", False),
        )

    elif command == "scenarios":
        return cli_handler.run_scenarios()

    elif command == "lookup":
        for required in ("names", "probe"):
            if required not in args:
                raise ValueError(f"Missing required parameter: {required}")
        if not isinstance(args["names"], list):
            raise ValueError("Parameter names must be a list of strings")
        return cli_handler.lookup(
            names=list(args["names"]),
            probe=args["probe"],
            strategy=args.get("strategy", "natural"),
        )

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  check
    Run the contract checker over the built-in suites.
    Optional: suite, verbose
    Suites: student-natural, student-by-name, student-equals-only,
            student-identity, student-order

    Example: check {"suite": "student-equals-only", "verbose": true}

  scenarios
    Run the documented lookup and defensive-copy scenarios.

    Example: scenarios

  lookup
    Insert students by name into a hash container, then probe with a
    fresh instance.
    Required: names, probe
    Optional: strategy (natural, by-name, equals-only, identity)

    Example: lookup {"names": ["Aden", "Bela"], "probe": "Aden", "strategy": "equals-only"}

  help
    Show this help message.

  exit
    Exit the CLI.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_reporter(settings: Settings) -> ReportPort:
    """Select the report adapter named by settings.report_backend."""
    if settings.report_backend == "markdown":
        return MarkdownReportAdapter(report_dir=settings.report_output_dir)
    return StdoutReportAdapter(verbose=settings.verbose)


def build_handler(settings: Settings) -> CLICommandHandler:
    """Wire the checker and reporter into a command handler."""
    checker = ContractChecker(max_samples=settings.max_samples)
    return CLICommandHandler(
        checker=checker,
        reporter=build_reporter(settings),
        initial_capacity=settings.initial_capacity,
        load_factor=settings.load_factor,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="valuecheck",
        description="Check equality/hash contracts and run value-identity scenarios.",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Run contract checks over built-in suites")
    check.add_argument("--suite", default=None, help="Run a single suite")
    check.add_argument("--verbose", action="store_true", help="Include full reports in output")

    sub.add_parser("scenarios", help="Run the documented teaching scenarios")

    lookup = sub.add_parser("lookup", help="Insert names and probe a hash container")
    lookup.add_argument("names", nargs="+", help="Student names to insert")
    lookup.add_argument("--probe", required=True, help="Name to look up")
    lookup.add_argument("--strategy", default="natural", help="Equality strategy")

    sub.add_parser("interactive", help="Start an interactive command loop")
    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, wire the application and run one command.

    Returns:
        Process exit code: 0 when every check and scenario behaved as
        predicted, 1 otherwise.
    """
    args = build_parser().parse_args(argv)
    settings = load_settings(args.env_file)
    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.debug(f"Running command {args.command}")

    handler = build_handler(settings)

    if args.command == "interactive":
        _run_cli_interactive(handler)
        return 0

    if args.command == "check":
        result = handler.check(suite=args.suite, verbose=args.verbose)
        ok = result["status"] == "success" and result["as_expected"]
    elif args.command == "scenarios":
        result = handler.run_scenarios()
        ok = result["matched"]
    else:
        result = handler.lookup(names=args.names, probe=args.probe, strategy=args.strategy)
        ok = result["status"] == "success"

    print(json.dumps(result, indent=2, default=str))
    return 0 if ok else 1


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Every check behaved as predicted
        1: A check deviated from its prediction, or a fatal error occurred
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
