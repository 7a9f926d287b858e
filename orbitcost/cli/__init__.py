"""
cli/ - Command-line interface.
"""

from .core import (
    OutputFormat,
    CLIContext,
    CommandResult,
    CLICommand,
    CommandRegistry,
    command_registry,
    format_output,
)
from .commands import (
    ListCommand,
    CategoriesCommand,
    EstimateCommand,
    ValidateCommand,
    SensitivityCommand,
    register_default_commands,
)

__all__ = [
    "OutputFormat",
    "CLIContext",
    "CommandResult",
    "CLICommand",
    "CommandRegistry",
    "command_registry",
    "format_output",
    "ListCommand",
    "CategoriesCommand",
    "EstimateCommand",
    "ValidateCommand",
    "SensitivityCommand",
    "register_default_commands",
]
