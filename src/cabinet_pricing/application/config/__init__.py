"""Quote request schema, loading and validation.

Public API:
    - QuoteConfiguration: Root request model
    - load_config / load_config_from_dict: Load and schema-validate a request
    - ConfigError: Raised when a request cannot be loaded
    - validate_config: Cross-field checks returning a ValidationResult
    - parse_global_settings: Build GlobalSettings from a flat settings table
    - config_to_*: Convert request models to domain objects

Example:
    >>> from pathlib import Path
    >>> from cabinet_pricing.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen-quote.json"))
    ...     print(f"{len(config.line_items)} line item(s)")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinet_pricing.application.config.adapter import (
    config_to_cabinet_type,
    config_to_dimensions,
    config_to_door_style,
    config_to_rates,
    config_to_settings,
    config_to_sheet,
    hardware_catalog_for,
    parse_global_settings,
)
from cabinet_pricing.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinet_pricing.application.config.schema import (
    SUPPORTED_VERSIONS,
    CabinetTypeConfig,
    DoorStyleConfig,
    HardwareRequirementConfig,
    LineItemConfig,
    NestingConfig,
    PartConfig,
    QuoteConfiguration,
    RatesConfig,
    SettingsConfig,
)
from cabinet_pricing.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "CabinetTypeConfig",
    "DoorStyleConfig",
    "HardwareRequirementConfig",
    "LineItemConfig",
    "NestingConfig",
    "PartConfig",
    "QuoteConfiguration",
    "RatesConfig",
    "SettingsConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
    # Adapters
    "config_to_cabinet_type",
    "config_to_dimensions",
    "config_to_door_style",
    "config_to_rates",
    "config_to_settings",
    "config_to_sheet",
    "hardware_catalog_for",
    "parse_global_settings",
]
