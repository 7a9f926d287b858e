"""
cli/core.py - Core CLI infrastructure.

Command base class, registry, execution context and output formatting.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, TYPE_CHECKING
from dataclasses import dataclass
from enum import Enum
from abc import ABC, abstractmethod
import argparse
import json
import logging

from ..errors import OrbitCostError

if TYPE_CHECKING:
    from ..bootstrap.app import OrbitCostApp

logger = logging.getLogger("cli")


class OutputFormat(Enum):
    """Output format options."""
    TEXT = "text"
    JSON = "json"
    TABLE = "table"
    MINIMAL = "minimal"


@dataclass
class CLIContext:
    """Context for CLI operations."""

    app: Optional["OrbitCostApp"] = None

    # Output settings
    output_format: OutputFormat = OutputFormat.TEXT
    verbose: bool = False


@dataclass
class CommandResult:
    """Result of a CLI command execution."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None

    # Preformatted text shown in TEXT mode instead of data
    text: Optional[str] = None
    exit_code: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }

    @classmethod
    def failure(cls, error: str, data: Any = None, exit_code: int = 1) -> "CommandResult":
        return cls(success=False, error=error, data=data, exit_code=exit_code)


class CLICommand(ABC):
    """Base class for CLI commands."""

    name: str = "command"
    description: str = "Base command"
    aliases: List[str] = []

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute the command."""
        pass

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Configure argument parser for this command."""
        pass

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute, turning estimation errors into a failed result."""
        try:
            return self.execute(ctx, args)
        except OrbitCostError as e:
            logger.debug(f"Command '{self.name}' failed: {e}")
            return CommandResult.failure(str(e), data=e.to_dict())


class CommandRegistry:
    """Registry for CLI commands."""

    def __init__(self):
        self._commands: Dict[str, CLICommand] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, command: CLICommand) -> None:
        """Register a command."""
        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def get(self, name: str) -> Optional[CLICommand]:
        """Get command by name or alias."""
        if name in self._commands:
            return self._commands[name]
        if name in self._aliases:
            return self._commands[self._aliases[name]]
        return None

    def list_commands(self) -> List[str]:
        """List all command names."""
        return list(self._commands.keys())

    def get_all(self) -> Dict[str, CLICommand]:
        """Get all commands."""
        return dict(self._commands)

    def add_subparsers(self, parser: argparse.ArgumentParser) -> None:
        """Add one subparser per registered command."""
        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        subparsers.required = True
        for command in self._commands.values():
            sub = subparsers.add_parser(
                command.name,
                aliases=command.aliases,
                help=command.description,
                description=command.description,
            )
            command.configure_parser(sub)


# Global registry
command_registry = CommandRegistry()


def format_output(result: CommandResult, format: OutputFormat) -> str:
    """Format command result for display."""
    if format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2, default=str)

    elif format == OutputFormat.TABLE:
        if isinstance(result.data, list) and result.data:
            lines = []
            if isinstance(result.data[0], dict):
                keys = list(result.data[0].keys())
                lines.append(" | ".join(keys))
                lines.append("-" * (len(keys) * 15))
                for row in result.data:
                    lines.append(" | ".join(str(row.get(k, "")) for k in keys))
            return "\n".join(lines)
        return str(result.data)

    elif format == OutputFormat.MINIMAL:
        if result.success:
            return str(result.data) if result.data else ""
        return result.error or "Error"

    else:  # TEXT
        if not result.success:
            return f"Error: {result.error}"
        if result.text is not None:
            return result.text
        output = result.message
        if result.data:
            if isinstance(result.data, dict):
                for k, v in result.data.items():
                    output += f"\n  {k}: {v}"
            else:
                output += f"\n{result.data}"
        return output
