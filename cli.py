#!/usr/bin/env python3
"""
Command-line interface for the support desk.

Usage:
    uv run python cli.py [command] [options]

Commands:
    menu        Start the interactive menu
    demo        Run the scripted demo
    test        Run the test suite

Examples:
    uv run python cli.py menu
    uv run python cli.py menu --layout flat --channels email sms
    uv run python cli.py demo
"""

import argparse
import subprocess
import sys
from typing import Optional

from pydantic import ValidationError

from helpdesk.config import DeskConfig, configure_logging


def run_menu(config: DeskConfig) -> int:
    """Start the interactive menu."""
    from console.menu import ConsoleMenu
    from helpdesk.desk import build_help_desk

    desk = build_help_desk(config)
    return ConsoleMenu(desk, layout=config.menu_layout).run()


def run_demo(config: DeskConfig) -> int:
    """Run the scripted demo."""
    from console.demo import run_support_demo
    from helpdesk.desk import build_help_desk

    run_support_demo(build_help_desk(config))
    return 0


def run_tests(args: list[str]) -> int:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    return subprocess.run(cmd).returncode


def add_desk_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by commands that build a desk."""
    parser.add_argument(
        "--channels",
        nargs="+",
        default=["email", "sms", "push"],
        help="Notification channels, in broadcast order (email, sms, push, console)",
    )
    parser.add_argument(
        "--fail-rate",
        type=float,
        default=0.0,
        help="Simulated failure rate for every channel (0.0-1.0)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Customer Support Desk CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s menu
  %(prog)s menu --layout flat
  %(prog)s demo --channels email console
  %(prog)s test -v
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Menu command
    menu_parser = subparsers.add_parser("menu", help="Start the interactive menu")
    menu_parser.add_argument(
        "--layout",
        choices=["nested", "flat"],
        default="nested",
        help="Menu layout",
    )
    add_desk_options(menu_parser)

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run the scripted demo")
    add_desk_options(demo_parser)

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    args = parser.parse_args(argv)

    if args.command == "test":
        return run_tests(args.pytest_args)
    if args.command not in ("menu", "demo"):
        parser.print_help()
        return 0

    try:
        config = DeskConfig(
            channels=args.channels,
            channel_fail_rate=args.fail_rate,
            log_level=args.log_level,
            menu_layout=getattr(args, "layout", "nested"),
        )
    except ValidationError as e:
        print(f"Invalid settings:\n{e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    if args.command == "menu":
        return run_menu(config)
    return run_demo(config)


if __name__ == "__main__":
    sys.exit(main())
