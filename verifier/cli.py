"""
CLI for the translator verification suite.
"""

import sys
import asyncio
from pathlib import Path
from typing import Optional
import click
import yaml

from .models import Suite, VerifierConfig
from .scenarios import get_scenarios


SUITE_CHOICES = {
    'live': [Suite.LIVE],
    'mock': [Suite.MOCK],
    'all': [Suite.MOCK, Suite.LIVE],
}


@click.command()
@click.option(
    '--suite',
    type=click.Choice(sorted(SUITE_CHOICES)),
    default='all',
    help='Which suite to run (default: all)'
)
@click.option(
    '--only',
    multiple=True,
    help='Scenario ID to run (can be repeated, e.g. --only Pos_Fun_0001)'
)
@click.option(
    '--url',
    help='Override translator URL from config'
)
@click.option(
    '--config',
    type=click.Path(),
    default='config.yaml',
    help='Path to configuration file (default: config.yaml)'
)
@click.option(
    '--report',
    help='Override report file path from config'
)
@click.option(
    '--no-report',
    is_flag=True,
    help='Do not write a markdown report'
)
@click.option(
    '--headed',
    is_flag=True,
    help='Run browser in headed mode (show browser window)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (screenshots, HTML snapshots, detailed logs)'
)
@click.option(
    '--list', 'list_only',
    is_flag=True,
    help='List scenarios and exit without starting a browser'
)
@click.version_option(version='1.0.0', prog_name='Singlish Translator Verifier')
def main(
    suite: str,
    only: tuple,
    url: Optional[str],
    config: str,
    report: Optional[str],
    no_report: bool,
    headed: bool,
    debug: bool,
    list_only: bool
):
    """
    Singlish → Sinhala translator verification.

    Drives the translator page in a browser, submits Singlish input and
    checks the Sinhala output. The mock suite runs the same scenarios
    against a local stand-in page.

    Examples:

      # Everything
      python main.py

      # Only the mocked page
      python main.py --suite mock

      # One live scenario, browser visible
      python main.py --suite live --only Pos_Fun_0004 --headed
    """
    suites = SUITE_CHOICES[suite]

    try:
        scenarios = get_scenarios(suites, only or None)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    if list_only:
        for s in scenarios:
            click.echo(f"{s.suite.value:<5} {s.id:<13} {s.check.value:<18} {s.title}")
        click.echo(f"\n{len(scenarios)} scenario(s)")
        return

    config_data = load_config(config)
    verifier_config = build_verifier_config(
        config_data=config_data,
        url=url,
        report=report,
        no_report=no_report,
        debug=debug,
        headed=headed
    )

    try:
        from .runner import run_verification

        result = asyncio.run(run_verification(verifier_config, suites, only or None))

    except Exception as e:
        click.echo(f"\nError: {e}", err=True)
        if debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    sys.exit(0 if result.all_passed else 1)


def load_config(config_path: str) -> dict:
    """Load configuration from YAML file."""
    path = Path(config_path)

    if not path.exists():
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        click.echo(f"Error loading config file: {e}", err=True)
        sys.exit(1)


def build_verifier_config(
    config_data: dict,
    url: Optional[str] = None,
    report: Optional[str] = None,
    no_report: bool = False,
    debug: bool = False,
    headed: bool = False
) -> VerifierConfig:
    """Build VerifierConfig from config file and CLI overrides."""
    defaults = VerifierConfig()

    translator_section = config_data.get('translator', {})
    browser_section = config_data.get('browser', {})
    resolver_section = config_data.get('resolver', {})
    report_section = config_data.get('report', {})
    debug_section = config_data.get('debug', {})

    report_file: Optional[str] = report or report_section.get('file', defaults.report_file)
    if no_report:
        report_file = None

    return VerifierConfig(
        translator_url=url or translator_section.get('url', defaults.translator_url),
        input_selector=translator_section.get('input_selector', defaults.input_selector),
        text_field_selector=translator_section.get('text_field_selector', defaults.text_field_selector),
        editable_selector=translator_section.get('editable_selector', defaults.editable_selector),
        headless=False if headed else browser_section.get('headless', defaults.headless),
        page_timeout_ms=browser_section.get('page_timeout_ms', defaults.page_timeout_ms),
        retry_attempts=browser_section.get('retry_attempts', defaults.retry_attempts),
        locale=browser_section.get('locale', defaults.locale),
        user_agent=browser_section.get('user_agent'),
        settle_ms=resolver_section.get('settle_ms', defaults.settle_ms),
        label_pattern=resolver_section.get('label_pattern', defaults.label_pattern),
        label_timeout_ms=resolver_section.get('label_timeout_ms', defaults.label_timeout_ms),
        max_ancestor_depth=resolver_section.get('max_ancestor_depth', defaults.max_ancestor_depth),
        type_delay_ms=resolver_section.get('type_delay_ms', defaults.type_delay_ms),
        report_file=report_file,
        timezone=report_section.get('timezone', defaults.timezone),
        debug_mode=debug or debug_section.get('enabled', False),
        debug_save_screenshots=debug_section.get('save_screenshots', defaults.debug_save_screenshots),
        debug_save_html=debug_section.get('save_html', defaults.debug_save_html),
        debug_log_file=debug_section.get('log_file', defaults.debug_log_file),
    )


if __name__ == '__main__':
    main()
