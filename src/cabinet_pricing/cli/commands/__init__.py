"""CLI command implementations for the cabinet-pricing application."""

from cabinet_pricing.cli.commands.validate import (
    display_load_error,
    display_validation_result,
    validate_command,
)

__all__ = ["display_load_error", "display_validation_result", "validate_command"]
