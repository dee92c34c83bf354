# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV sun path exporter.

Exports the sampled sun path, one row per sample.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from sunviz.ports.export import SunReportExporter
from sunviz.domain.report import SunReport
from sunviz.domain.serialization import SAMPLE_ROW_HEADER, sample_to_row

logger = logging.getLogger(__name__)


class CsvSunPathExporter(SunReportExporter):
    """Exports sun path samples to CSV."""

    def export(self, report: SunReport, path: str) -> int:
        if not report.path:
            logger.warning(
                "Sun path for %s is empty; writing header only", report.date.isoformat(),
            )

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(SAMPLE_ROW_HEADER)
            for sample in report.path:
                writer.writerow(sample_to_row(sample))

        logger.info("Wrote %d sun path samples to %s", len(report.path), path)
        return len(report.path)
