"""
Output formatters for scan results.
"""

import csv
import io
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from .models import ScanResult

logger = logging.getLogger(__name__)


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    name = ""
    extension = ""

    @abstractmethod
    def format(self, result: ScanResult, **kwargs) -> str:
        """Format the scan result as a string."""

    def save(self, result: ScanResult, output_path: Path, **kwargs) -> None:
        """Save formatted output to file."""
        content = self.format(result, **kwargs)
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        logger.info(f"Saved {self.name} output to {output_path}")


class JsonFormatter(BaseFormatter):
    """JSON output formatter."""

    name = "JSON"
    extension = ".json"

    def format(self, result: ScanResult, **kwargs) -> str:
        indent = None if kwargs.get('compact', False) else 2
        return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


class CsvFormatter(BaseFormatter):
    """CSV output formatter."""

    name = "CSV"
    extension = ".csv"

    def format(self, result: ScanResult, **kwargs) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(['Name', 'Mod ID', 'Version', 'Filename', 'Type', 'Authors', 'Homepage', 'MC Version', 'Disabled'])

        for entry in result.entries:
            details = entry.details
            writer.writerow([
                entry.name,
                details.mod_id if details else '',
                entry.version,
                entry.filename,
                entry.artifact_type.value,
                '; '.join(details.authors) if details else '',
                details.homepage if details else '',
                details.mc_version if details else '',
                '' if entry.enabled else 'Yes',
            ])

        return output.getvalue()


class MarkdownFormatter(BaseFormatter):
    """Markdown table output formatter."""

    name = "Markdown"
    extension = ".md"

    @staticmethod
    def _cell(value: str) -> str:
        return value.replace('|', '\\|').replace('\n', ' ')

    def format(self, result: ScanResult, **kwargs) -> str:
        lines = [
            "# Mods",
            "",
            f"**Total Mods:** {len(result.entries)}  ",
            f"**Without Metadata:** {len(result.without_metadata)}  ",
            f"**Generated:** {result.generated_at or 'N/A'}  ",
            "",
            "| Name | Version | Authors | Homepage | File | Status |",
            "|------|---------|---------|----------|------|--------|",
        ]

        for entry in result.entries:
            authors = ', '.join(entry.details.authors) if entry.details else ''
            homepage = entry.details.homepage if entry.details else ''
            status = 'Disabled' if not entry.enabled else 'Enabled'
            lines.append(
                f"| {self._cell(entry.name)} | {self._cell(entry.version) or '-'} | {self._cell(authors)[:40]} "
                f"| {self._cell(homepage)} | {self._cell(entry.filename)} | {status} |"
            )

        return "\n".join(lines)


# Registry of available formatters
FORMATTERS: Dict[str, BaseFormatter] = {
    'json': JsonFormatter(),
    'csv': CsvFormatter(),
    'markdown': MarkdownFormatter(),
    'md': MarkdownFormatter(),
}


def get_formatter(format_name: str) -> Optional[BaseFormatter]:
    """Get formatter by name."""
    return FORMATTERS.get(format_name.lower())
