"""Validation structures and pricing advisories for quote requests.

Schema validation (types, ranges, unknown fields) happens in Pydantic.
This module adds the checks that need the whole request: references
between sections, formulas that cannot be evaluated and data that will
make the engine fall back to default values.
"""

from dataclasses import dataclass, field
from typing import Any

from cabinet_pricing.application.config.schema import QuoteConfiguration
from cabinet_pricing.domain.services.formula import FormulaError, evaluate_strict
from cabinet_pricing.domain.value_objects import CabinetDimensions


@dataclass
class ValidationError:
    """A blocking problem; the quote cannot be priced until it is fixed.

    Attributes:
        path: JSON path to the offending field (e.g. "line_items[0].cabinet_type")
        message: Human-readable description of the error
        value: The value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking concern; the quote prices but may not be what was meant.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Collected validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_references(config: QuoteConfiguration) -> ValidationResult:
    """Check that line items only reference defined ids."""
    result = ValidationResult()
    for i, item in enumerate(config.line_items):
        path = f"line_items[{i}]"
        if config.cabinet_type(item.cabinet_type) is None:
            result.add_error(
                f"{path}.cabinet_type",
                f"Unknown cabinet type '{item.cabinet_type}'",
                item.cabinet_type,
            )
        if item.door_style is not None and config.door_style(item.door_style) is None:
            result.add_error(
                f"{path}.door_style",
                f"Unknown door style '{item.door_style}'",
                item.door_style,
            )
        if (
            item.hardware_brand is not None
            and item.hardware_brand not in config.hardware_brands
        ):
            result.add_error(
                f"{path}.hardware_brand",
                f"Unknown hardware brand '{item.hardware_brand}'",
                item.hardware_brand,
            )
    return result


def check_formulas(config: QuoteConfiguration) -> ValidationResult:
    """Evaluate every part formula at the cabinet type's default size.

    Failing formulas are errors when ``settings.strict_formulas`` is set
    and warnings otherwise, since the engine then prices them as 0.
    """
    result = ValidationResult()
    strict = config.settings.strict_formulas
    for c, cabinet in enumerate(config.cabinet_types):
        bindings = CabinetDimensions(
            width=cabinet.default_width_mm,
            height=cabinet.default_height_mm,
            depth=cabinet.default_depth_mm,
            left_width=cabinet.left_side_width_mm,
            right_width=cabinet.right_side_width_mm,
            left_depth=cabinet.left_side_depth_mm,
            right_depth=cabinet.right_side_depth_mm,
        ).bindings(1)
        for p, part in enumerate(cabinet.parts):
            for attr in ("width_formula", "height_formula"):
                formula = getattr(part, attr)
                path = f"cabinet_types[{c}].parts[{p}].{attr}"
                try:
                    value = evaluate_strict(formula, bindings)
                except FormulaError as e:
                    if strict:
                        result.add_error(path, f"Formula cannot be evaluated: {e}", formula)
                    else:
                        result.add_warning(
                            path,
                            f"Formula cannot be evaluated and will price as 0: {e}",
                            "Use only numbers, + - * / ( ) and cabinet variables",
                        )
                    continue
                if value <= 0 and not part.is_hardware:
                    result.add_warning(
                        path,
                        f"Formula gives {value:g} mm at the default size",
                        "Check the formula or mark the part as hardware",
                    )
    return result


def check_pricing_advisories(config: QuoteConfiguration) -> ValidationResult:
    """Warn about data the engine will replace with fallback values."""
    result = ValidationResult()
    for c, cabinet in enumerate(config.cabinet_types):
        for r, req in enumerate(cabinet.hardware_requirements):
            priced = req.id in config.hardware_catalog or any(
                req.id in catalog for catalog in config.hardware_brands.values()
            )
            if not priced:
                result.add_warning(
                    f"cabinet_types[{c}].hardware_requirements[{r}].id",
                    f"Hardware requirement '{req.id}' has no catalog price; "
                    f"the fallback unit cost "
                    f"{config.settings.hardware_fallback_unit_cost:.2f} will be used",
                    "Add the requirement to hardware_catalog",
                )
        for p, part in enumerate(cabinet.parts):
            if part.is_door is None and part.is_hardware is None:
                result.add_warning(
                    f"cabinet_types[{c}].parts[{p}]",
                    f"Part '{part.name}' has no category flags; "
                    "its category is inferred from its name",
                    "Set is_door / is_hardware explicitly",
                )
    if not config.line_items:
        result.add_warning("line_items", "Quote has no line items")
    return result


def validate_config(config: QuoteConfiguration) -> ValidationResult:
    """Run every cross-field check on a schema-valid quote request."""
    result = ValidationResult()
    result.merge(check_references(config))
    result.merge(check_formulas(config))
    result.merge(check_pricing_advisories(config))
    return result
