# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for solar data export.

Adapters implement these to write sun reports in different formats.
"""
from sunviz.ports.export import SunReportExporter

__all__ = ["SunReportExporter"]
