"""Typer CLI for cabinet quotes."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinet_pricing.application import PriceQuoteCommand, QuoteOutput
from cabinet_pricing.application.config import (
    ConfigError,
    QuoteConfiguration,
    load_config,
)
from cabinet_pricing.cli.commands import display_load_error, validate_command
from cabinet_pricing.domain import FormulaError, PricingError, evaluate, evaluate_strict
from cabinet_pricing.infrastructure import (
    ExporterRegistry,
    QuoteFormatter,
    SheetLayoutFormatter,
)

app = typer.Typer(
    name="cabinet-pricing",
    help="Price cabinets, estimate their weight and nest their parts onto sheets.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log pricing detail to stderr"),
    ] = False,
) -> None:
    """Cabinet pricing and sheet nesting."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load(config_file: Path) -> QuoteConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _run(config: QuoteConfiguration, include_legacy: bool = False) -> QuoteOutput:
    try:
        result = PriceQuoteCommand(include_legacy=include_legacy).execute(config)
    except PricingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


def _emit(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(content, encoding="utf-8")
    typer.echo(f"Wrote {output_file}")


@app.command()
def quote(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON quote request"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, csv"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the quote to this file"),
    ] = None,
    legacy: Annotated[
        bool,
        typer.Option("--legacy", help="Show the fixed-shape legacy price for comparison"),
    ] = False,
) -> None:
    """Price every line item of a quote request."""
    output_format = output_format.lower()
    if output_format != "text" and not ExporterRegistry.is_registered(output_format):
        available = ", ".join(["text", *ExporterRegistry.available_formats()])
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {available}", err=True)
        raise typer.Exit(code=1)

    result = _run(_load(config_file), include_legacy=legacy)

    if output_format == "text":
        content = QuoteFormatter().format(result)
    else:
        content = ExporterRegistry.get(output_format)().export_string(result)
    _emit(content, output_file)


@app.command()
def nest(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON quote request"),
    ],
    sheet_width: Annotated[
        float | None,
        typer.Option("--sheet-width", help="Stock sheet width in mm"),
    ] = None,
    sheet_height: Annotated[
        float | None,
        typer.Option("--sheet-height", help="Stock sheet height in mm"),
    ] = None,
    target_efficiency: Annotated[
        float | None,
        typer.Option(
            "--target-efficiency",
            "-e",
            min=0.01,
            max=1.0,
            help="Fraction of a sheet to fill before starting the next",
        ),
    ] = None,
) -> None:
    """Nest the parts of a quote request onto stock sheets."""
    config = _load(config_file)

    overrides: dict[str, float | bool] = {"enabled": True}
    if sheet_width is not None:
        overrides["sheet_width_mm"] = sheet_width
    if sheet_height is not None:
        overrides["sheet_height_mm"] = sheet_height
    if target_efficiency is not None:
        overrides["target_efficiency"] = target_efficiency
    config = config.model_copy(
        update={"nesting": config.nesting.model_copy(update=overrides)}
    )

    result = _run(config)
    assert result.nesting is not None
    typer.echo(SheetLayoutFormatter().format(result.nesting, result.packages))


@app.command(name="evaluate")
def evaluate_formula(
    formula: Annotated[
        str,
        typer.Argument(help="Arithmetic formula, e.g. 'width - 36'"),
    ],
    variables: Annotated[
        list[str] | None,
        typer.Option("--var", help="Variable binding as name=value (repeatable)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail instead of returning 0 on a bad formula"),
    ] = False,
) -> None:
    """Evaluate a part dimension formula."""
    bindings: dict[str, float] = {}
    for binding in variables or []:
        name, sep, value = binding.partition("=")
        try:
            if not sep or not name.strip():
                raise ValueError
            bindings[name.strip()] = float(value)
        except ValueError:
            typer.echo(f"Invalid variable binding: {binding!r} (expected name=value)", err=True)
            raise typer.Exit(code=1)

    if strict:
        try:
            value = evaluate_strict(formula, bindings)
        except FormulaError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    else:
        value = evaluate(formula, bindings)
    typer.echo(f"{value:g}")


if __name__ == "__main__":
    app()
