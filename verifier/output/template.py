"""
Markdown template builder.
Builds the run header and per-scenario blocks of the verification report.
"""

from datetime import datetime
from typing import List, Optional
import pytz

from ..models import ScenarioOutcome, SuiteReport
from ..utils import get_logger


class MarkdownTemplateBuilder:
    """Builds markdown report blocks for a verification run."""

    def __init__(self, timezone: str = "Asia/Colombo"):
        self.timezone = timezone
        self.logger = get_logger()

    def build_run_header(self, report: SuiteReport) -> str:
        """Build the report header with run timestamp and totals."""
        lines = [
            "# Translator Verification Report",
            "",
            f"Run: {self._format_timestamp()}",
            f"Suites: {', '.join(s.value for s in report.suites) or 'none'}",
            f"Translator: {report.translator_url or 'Unsure'}",
            f"Result: {report.passed} passed, {report.failed} failed, {len(report.outcomes)} total",
        ]
        if report.duration_seconds is not None:
            lines.append(f"Duration: {report.duration_seconds:.1f}s")
        lines.append("")
        return "\n".join(lines)

    def build_summary_table(self, outcomes: List[ScenarioOutcome]) -> str:
        """Build a one-row-per-scenario table."""
        lines = [
            "| Suite | Scenario | Check | Result | Resolved by |",
            "| --- | --- | --- | --- | --- |",
        ]
        for outcome in outcomes:
            scenario = outcome.scenario
            lines.append(
                f"| {scenario.suite.value} | {self._escape(scenario.name)} | {scenario.check.value} "
                f"| {'PASS' if outcome.passed else 'FAIL'} | {outcome.strategy.value} |"
            )
        lines.append("")
        return "\n".join(lines)

    def build_failure_block(self, outcome: ScenarioOutcome) -> str:
        """
        Build the detail block for a failed scenario:

        ### Pos_Fun_0001 - Simple sentence – daily usage (live)
        Input: `...`
        Expected: `...`
        Actual: `...`
        Reason: ...
        """
        scenario = outcome.scenario
        lines = [
            f"### {scenario.name} ({scenario.suite.value})",
            f"Input: {self._code(scenario.input)}",
            f"Expected: {self._code(scenario.expected)}",
            f"Actual: {self._code(outcome.actual)}",
            f"Reason: {outcome.error or outcome.message or 'Unsure'}",
            "",
        ]
        return "\n".join(lines)

    def _format_timestamp(self, when: Optional[datetime] = None) -> str:
        try:
            tz = pytz.timezone(self.timezone)
        except pytz.UnknownTimeZoneError:
            self.logger.warning(f"Unknown timezone {self.timezone}, using UTC")
            tz = pytz.UTC

        moment = when.astimezone(tz) if when else datetime.now(tz)
        return moment.strftime("%Y-%m-%d %H:%M:%S %Z")

    @staticmethod
    def _code(value: Optional[str]) -> str:
        if value is None:
            return "n/a"
        return f"`{value}`" if value else "(empty)"

    @staticmethod
    def _escape(text: str) -> str:
        return text.replace("|", "\\|")
