# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON sun report exporter.

Writes location, day times, spot position and sun path as one JSON
document.
"""
import json
import logging

from sunviz.ports.export import SunReportExporter
from sunviz.domain.report import SunReport
from sunviz.domain.serialization import report_to_dict

logger = logging.getLogger(__name__)


class JsonSunReportExporter(SunReportExporter):
    """Exports a full sun report to JSON."""

    def export(self, report: SunReport, path: str) -> int:
        data = report_to_dict(report)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.info("Wrote sun report for %s to %s", report.date.isoformat(), path)
        return len(report.path)
