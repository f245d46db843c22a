"""
Markdown report writer.
Handles atomic writes to a single output file.
"""

import os
from pathlib import Path
import tempfile
import shutil

from ..models import SuiteReport
from ..utils import get_logger
from .template import MarkdownTemplateBuilder


class MarkdownWriter:
    """
    Writes a verification report to a single markdown file.
    Writes are atomic so an interrupted run never leaves a half report.
    """

    def __init__(self, output_file: str, timezone: str = "Asia/Colombo"):
        self.output_file = Path(output_file)
        self.timezone = timezone
        self.logger = get_logger()
        self.template_builder = MarkdownTemplateBuilder(timezone=timezone)

        self.output_file.parent.mkdir(parents=True, exist_ok=True)

    def build_report(self, report: SuiteReport) -> str:
        """Render the full report text."""
        content_lines = [
            self.template_builder.build_run_header(report),
            "## Scenarios",
            "",
            self.template_builder.build_summary_table(report.outcomes),
        ]

        failures = [o for o in report.outcomes if not o.passed]
        if failures:
            content_lines.append("## Failures")
            content_lines.append("")
            for outcome in failures:
                content_lines.append(self.template_builder.build_failure_block(outcome))

        return "\n".join(content_lines)

    def write_report(self, report: SuiteReport):
        """Write the report, replacing any previous one."""
        self.logger.info(f"Writing report for {len(report.outcomes)} scenario(s) to {self.output_file}")

        try:
            self._atomic_write(self.build_report(report))
        except Exception as e:
            self.logger.error(f"Error writing report file: {e}", exc_info=True)
            raise

    def _atomic_write(self, content: str):
        """Write content atomically using temp file + rename."""
        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.output_file.parent,
            prefix='.tmp_',
            suffix='.md'
        )

        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                f.write(content)

            shutil.move(temp_path, self.output_file)

        except Exception:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def get_content(self) -> str:
        """Read current content of the report file."""
        if not self.output_file.exists():
            return ""

        with open(self.output_file, 'r', encoding='utf-8') as f:
            return f.read()
