"""
bootstrap/entrypoints.py - Application entry points.

Provides logging setup and the ``orbitcost`` CLI entry point.
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import json
import logging
import sys

logger = logging.getLogger("bootstrap.entrypoints")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = JSONFormatter() if json_format else logging.Formatter(fmt)

    # Console handler; stdout carries command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_orbitcost", False):
            root_logger.removeHandler(handler)
    console_handler._orbitcost = True
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        file_handler._orbitcost = True
        root_logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    """Top-level parser with one subcommand per registered command."""
    from ..cli import OutputFormat, command_registry, register_default_commands

    parser = argparse.ArgumentParser(
        description="Orbital system cost and risk estimator",
        prog="orbitcost",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file (JSON or YAML)",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default from config)",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format (--json is a shortcut for --format json)",
    )

    register_default_commands(command_registry).add_subparsers(parser)
    return parser


def cli_main(args: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = build_parser()
    parsed = parser.parse_args(args)

    try:
        from ..cli import CLIContext, CommandResult, OutputFormat, command_registry, format_output
        from ..errors import OrbitCostError
        from .app import OrbitCostApp
        from .config import load_config

        try:
            config = load_config(parsed.config)
        except OrbitCostError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        log_level = "DEBUG" if parsed.verbose or config.debug else (parsed.log_level or config.logging.level)
        setup_logging(
            level=log_level,
            log_file=parsed.log_file or config.logging.log_file,
            json_format=config.logging.json_logs,
            fmt=config.logging.format,
        )

        output_format = OutputFormat.JSON if parsed.json else OutputFormat(parsed.format)
        command = command_registry.get(parsed.command)

        try:
            app = OrbitCostApp(config=config).build()
        except OrbitCostError as e:
            print(format_output(CommandResult.failure(str(e), data=e.to_dict()), output_format))
            return 1

        ctx = CLIContext(app=app, output_format=output_format, verbose=parsed.verbose)
        result = command.run(ctx, parsed)
        print(format_output(result, output_format))
        return result.exit_code

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1
