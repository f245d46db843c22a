"""
Logging utilities for the verification suite.
Supports both normal mode (rich console output) and debug mode (detailed logs).
"""

import sys
import logging
from pathlib import Path
from typing import Optional, List
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table


class VerifierLogger:
    """
    Logger for the verifier with rich console output and optional debug mode.
    """

    def __init__(self, debug_mode: bool = False, debug_log_file: Optional[str] = None):
        self.debug_mode = debug_mode
        self.debug_log_file = debug_log_file
        self.console = Console()

        self._setup_logging()

    def _setup_logging(self):
        """Configure Python logging."""
        self.logger = logging.getLogger('singlish-verifier')
        self.logger.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)

        # Remove existing handlers
        self.logger.handlers = []

        if not self.debug_mode:
            console_handler = RichHandler(console=self.console, rich_tracebacks=True)
        else:
            console_handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            console_handler.setFormatter(formatter)

        console_handler.setLevel(logging.INFO)
        self.logger.addHandler(console_handler)

        # File handler for debug mode
        if self.debug_mode and self.debug_log_file:
            log_path = Path(self.debug_log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def print_header(self, title: str):
        """Print a header/banner."""
        self.console.print(Panel(title, style="bold blue"))

    def print_section(self, title: str):
        """Print a section header."""
        self.console.print(f"\n[bold cyan]{title}[/bold cyan]")

    def info(self, message: str):
        self.logger.info(message)

    def debug(self, message: str):
        self.logger.debug(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)

    def success(self, message: str):
        """Log a passed check."""
        self.console.print(f"[green]✓[/green] {message}")

    def failure(self, message: str):
        """Log a failed check."""
        self.console.print(f"[red]✗[/red] {message}")

    def print_table(self, title: str, data: List[list], headers: List[str]):
        """Print a formatted table."""
        table = Table(title=title)
        for header in headers:
            table.add_column(header)
        for row in data:
            table.add_row(*[str(cell) for cell in row])
        self.console.print(table)

    def print_summary(self, total: int, passed: int, failed: int, duration: float):
        """Print completion summary."""
        self.print_section("Verification Complete")

        table = Table(show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="bold")
        table.add_row("Total scenarios", str(total))
        table.add_row("Passed", f"[green]{passed}[/green]")
        table.add_row("Failed", f"[red]{failed}[/red]" if failed else "0")
        table.add_row("Duration", f"{duration:.1f}s")
        self.console.print(table)

    def save_debug_screenshot(self, screenshot_data: bytes, scenario_id: str, reason: str):
        """Save screenshot in debug mode."""
        if not self.debug_mode:
            return

        filename = self._debug_path('screenshots', scenario_id, reason, 'png')
        with open(filename, 'wb') as f:
            f.write(screenshot_data)

        self.debug(f"Screenshot saved: {filename}")

    def save_debug_html(self, html_content: str, scenario_id: str, reason: str):
        """Save HTML snapshot in debug mode."""
        if not self.debug_mode:
            return

        filename = self._debug_path('html', scenario_id, reason, 'html')
        with open(filename, 'w', encoding='utf-8') as f:
            f.write(html_content)

        self.debug(f"HTML snapshot saved: {filename}")

    def _debug_path(self, kind: str, scenario_id: str, reason: str, suffix: str) -> Path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        safe_id = "".join(c for c in scenario_id if c.isalnum() or c in ('_', '-'))

        directory = Path('./debug') / kind
        directory.mkdir(parents=True, exist_ok=True)

        return directory / f"{safe_id}_{reason}_{timestamp}.{suffix}"


# Global logger instance
_logger_instance: Optional[VerifierLogger] = None


def get_logger() -> VerifierLogger:
    """Get the global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = VerifierLogger()
    return _logger_instance


def init_logger(debug_mode: bool = False, debug_log_file: Optional[str] = None) -> VerifierLogger:
    """Initialize the global logger."""
    global _logger_instance
    _logger_instance = VerifierLogger(debug_mode=debug_mode, debug_log_file=debug_log_file)
    return _logger_instance
