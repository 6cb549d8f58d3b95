# src/a11y_auditor/cli.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm.auto import tqdm

from a11y_auditor import facade
from a11y_auditor.controllers.report_controller import STYLES
from a11y_auditor.model import CheckOptions, CheckResult
from a11y_auditor.utils.config_loader import get_nested_config
from a11y_auditor.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

# Subcommand -> element category
COMMANDS = {
    "nav": "nav",
    "dropdown": "dropdown",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="a11y-helper",
        description="Check HTML fragments for navigation and dropdown accessibility issues."
    )
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level.")
    subparsers = parser.add_subparsers(dest="command", help="Checks")

    for command, category in COMMANDS.items():
        check_parser = subparsers.add_parser(command, help=f"Check {category} elements")
        check_parser.add_argument("files", nargs="+", help="HTML files to check ('-' reads stdin)")
        check_parser.add_argument(
            "--style",
            choices=STYLES,
            default=get_nested_config("report.default_style", "diagnostic"),
            help="Report layout"
        )
        check_parser.add_argument(
            "--no-suggestions",
            action="store_true",
            default=not get_nested_config("report.provide_suggestions", True),
            help="Omit fix suggestions and example code"
        )
        check_parser.add_argument(
            "--mode",
            choices=("realtime", "on-demand"),
            default="on-demand",
            help="Invocation mode (informational)"
        )

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP tool server")
    serve_parser.add_argument("--host", type=str, default=None, help="Host interface to bind to")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to")

    return parser


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def run_checks(category: str, files: List[str], options: CheckOptions) -> List[Tuple[str, CheckResult]]:
    """Checks every file in order; unreadable files are reported and skipped."""
    results = []
    for path in tqdm(files, desc=f"Checking {category}", unit="file", disable=len(files) < 2):
        try:
            markup = _read_source(path)
        except OSError as e:
            logger.error("Could not read %s: %s", path, e)
            print(f"❌ Could not read {path}: {e}", file=sys.stderr)
            continue
        results.append((path, facade.check(category, markup, options)))
    return results


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line entry point.

    Returns:
        int: 1 when any error finding was reported (or input was unreadable), else 0.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logger(
        general_level=args.log_level or get_nested_config("debug.level", "WARNING"),
        module_specific_levels=get_nested_config("debug.module_levels", {}),
        silenced_loggers=get_nested_config("debug.silenced_loggers", {}),
    )

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "serve":
        from a11y_auditor.server.app import run_server
        run_server(args.host, args.port)
        return 0

    options = CheckOptions(provide_suggestions=not args.no_suggestions, mode=args.mode)
    results = run_checks(COMMANDS[args.command], args.files, options)

    exit_code = 0 if len(results) == len(args.files) else 1
    for path, result in results:
        if len(args.files) > 1:
            print(f"\n== {path}")
        print(facade.format_result(result, args.style))
        if result.summary.errors:
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
