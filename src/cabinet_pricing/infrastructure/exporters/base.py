"""Exporter protocol and registry."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinet_pricing.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for quote exporters.

    Attributes:
        format_name: Registry key for the format (e.g. "csv", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, output: QuoteOutput) -> str:
        """Render a quote in this format."""
        ...

    def export(self, output: QuoteOutput, path: Path) -> None:
        """Write the rendered quote to ``path``."""
        ...


class ExporterRegistry:
    """Registry of exporter classes keyed by format name.

    Example:
        @ExporterRegistry.register("csv")
        class CutlistCsvExporter:
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator registering an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    "Overwriting existing exporter for format '%s'", format_name
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(
                "Registered exporter '%s': %s", format_name, exporter_class.__name__
            )
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


def write_text(path: Path, content: str) -> None:
    """Write exporter output, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", path)
