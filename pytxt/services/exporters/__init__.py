"""Exporter strategies and registry."""

from .base import BaseExporter, ExporterRegistryInst
from .html_exporter import HtmlExporter
from .rtf_exporter import RtfExporter

__all__ = ["BaseExporter", "ExporterRegistryInst", "HtmlExporter", "RtfExporter"]
