"""Render linguistic example lists for the gb4e and linguex LaTeX packages."""

from lingex.exporter import ExampleExporter, ExportResult, export_text

__version__ = "0.1.0"

__all__ = ["ExampleExporter", "ExportResult", "export_text", "__version__"]
