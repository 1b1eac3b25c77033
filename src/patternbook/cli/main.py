"""
Main CLI module with argument parsing and command execution.

    patternbook list [--format json|yaml|table] [--category NAME]
    patternbook run NAME [NAME ...]
    patternbook run --all
"""
import argparse
import os
import sys
from typing import List, Optional

from patternbook._version import __version__
from patternbook.application.decorators import get_demo_registry
from patternbook.application.discovery import discover_demos
from patternbook.application.runner import DemoRunner
from patternbook.cli.formatters import format_output
from patternbook.config.manager import ConfigurationManager
from patternbook.config.schemas import LoggingConfig
from patternbook.domain.base.exceptions import DomainException
from patternbook.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "patternbook",
        description="patternbook - runnable design pattern and SOLID demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                         # List all demos
  %(prog)s list --format table          # Display as table
  %(prog)s run decorator singleton      # Run two demos
  %(prog)s run --all                    # Run every demo
        """
    )

    parser.add_argument('--config', help='Configuration file path (JSON)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured log level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List registered demos')
    list_parser.add_argument('--format', choices=['json', 'yaml', 'table'], default='table',
                             help='Output format')
    list_parser.add_argument('--category', help='Only list demos in this category')

    run_parser = subparsers.add_parser('run', help='Run demos')
    run_parser.add_argument('names', nargs='*', help='Demo names to run')
    run_parser.add_argument('--all', action='store_true', help='Run every registered demo')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        parser.exit(2)

    if args.command == 'run' and not args.all and not args.names:
        run_parser.error('name at least one demo or pass --all')

    return args


def execute_command(args: argparse.Namespace, runner: DemoRunner) -> int:
    """Route a parsed command to its handler."""
    if args.command == 'list':
        demos = [r.to_dict() for r in get_demo_registry(args.category)]
        print(format_output({"demos": demos}, args.format))
        return 0

    if args.command == 'run':
        if args.all:
            runner.run_all()
        else:
            runner.run_many(args.names)
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = parse_args(argv)

    try:
        config_manager = ConfigurationManager(args.config)
        app_config = config_manager.app_config
        logging_config = app_config.logging
        if args.log_level:
            logging_config = LoggingConfig.model_validate(
                {**logging_config.model_dump(), "level": args.log_level}
            )
        setup_logging(logging_config)

        discover_demos()
        return execute_command(args, DemoRunner(app_config.demo))
    except DomainException as e:
        logger.error("Command failed", error=str(e), error_type=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
