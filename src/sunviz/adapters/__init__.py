# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for sun report export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from sunviz.adapters.csv_exporter import CsvSunPathExporter
from sunviz.adapters.json_exporter import JsonSunReportExporter

__all__ = ["CsvSunPathExporter", "JsonSunReportExporter"]
