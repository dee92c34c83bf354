# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for sun report export.

Adapters implement this to export day times and sun paths in various
formats (CSV, JSON, etc.).
"""
from typing import Protocol, runtime_checkable

from sunviz.domain.report import SunReport


@runtime_checkable
class SunReportExporter(Protocol):
    """Port for exporting a sun report to file."""

    def export(self, report: SunReport, path: str) -> int:
        """
        Export a sun report to a file.

        Args:
            report: Result of build_sun_report().
            path: Output file path.

        Returns:
            Number of sun path samples written.
        """
        ...
