"""Quote file loader with error reporting.

Loads JSON quote requests and turns file system errors, JSON syntax
errors and Pydantic validation errors into a single :class:`ConfigError`
carrying a category and per-field details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinet_pricing.application.config.schema import QuoteConfiguration


class ConfigError(Exception):
    """Raised when a quote request cannot be loaded or validated.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: Path of the quote file (if loaded from disk)
        details: Per-error details (line/column for JSON, field path for validation)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("settings", "gst_rate"))
        'settings.gst_rate'
        >>> _format_json_path(("cabinet_types", 0, "parts", 1, "quantity"))
        'cabinet_types[0].parts[1].quantity'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_error(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    details = [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]
    lines = ["Quote configuration is invalid:"]
    for detail in details:
        # Whole-object inputs are too noisy to echo back
        value = detail["value"]
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> QuoteConfiguration:
    """Validate a quote request held in memory, e.g. an API request body.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return QuoteConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path) from e


def load_config(path: Path) -> QuoteConfiguration:
    """Load and validate a quote request from a JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON or
            does not match the schema. ``error_type`` tells which.

    Example:
        >>> from pathlib import Path
        >>> try:
        ...     config = load_config(Path("kitchen-quote.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Quote file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading quote file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading quote file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in quote file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Quote file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )
    return load_config_from_dict(data, path)
