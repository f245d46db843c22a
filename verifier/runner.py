"""
Main orchestrator for the verification suite.
Coordinates browser, scenarios, resolver and report output.
"""

import time
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from .browser import BrowserManager, TranslatorContext
from .checks import Observation, evaluate
from .mock_page import MOCK_TRANSLATOR_HTML
from .models import (
    CheckKind,
    InputAction,
    ReadMode,
    ResolutionStrategy,
    Scenario,
    ScenarioOutcome,
    Suite,
    SuiteReport,
    VerifierConfig,
)
from .output import MarkdownWriter
from .scenarios import get_scenarios
from .utils import init_logger, get_logger


async def run_verification(
    config: VerifierConfig,
    suites: Iterable[Suite],
    only: Optional[Iterable[str]] = None,
) -> SuiteReport:
    """
    Main entry point for running the verification suites.

    Args:
        config: Run configuration
        suites: Suites to run, in order
        only: Optional scenario IDs to restrict the run to

    Returns:
        SuiteReport with one outcome per scenario
    """
    logger = init_logger(
        debug_mode=config.debug_mode,
        debug_log_file=config.debug_log_file if config.debug_mode else None
    )

    suites = [Suite(s) for s in suites]
    scenarios = get_scenarios(suites, only)

    logger.print_header("Singlish → Sinhala Translator Verification")
    logger.info(f"Running {len(scenarios)} scenario(s) from suite(s): {', '.join(s.value for s in suites)}")

    start_time = time.time()
    report = SuiteReport(suites=suites, translator_url=config.translator_url)

    async with BrowserManager(config) as browser_manager:
        for suite in suites:
            suite_scenarios = [s for s in scenarios if s.suite == suite]
            if not suite_scenarios:
                continue

            logger.print_section(f"{suite.value.title()} suite")
            report.outcomes.extend(
                await run_scenarios(browser_manager, suite_scenarios, config)
            )

    report.duration_seconds = time.time() - start_time

    logger.print_summary(
        total=len(report.outcomes),
        passed=report.passed,
        failed=report.failed,
        duration=report.duration_seconds
    )

    failures = [o for o in report.outcomes if not o.passed]
    if failures:
        logger.print_table(
            title="Failed scenarios",
            data=[[o.scenario.suite.value, o.scenario.id, o.error or o.message] for o in failures],
            headers=["Suite", "ID", "Reason"],
        )

    if config.report_file:
        writer = MarkdownWriter(output_file=config.report_file, timezone=config.timezone)
        writer.write_report(report)

    return report


async def run_scenarios(
    browser_manager: BrowserManager,
    scenarios: List[Scenario],
    config: VerifierConfig,
) -> List[ScenarioOutcome]:
    """Run scenarios sequentially, each in a fresh browser context."""
    logger = get_logger()
    outcomes = []

    for scenario in scenarios:
        outcome = await run_scenario(browser_manager, scenario, config)
        outcomes.append(outcome)

        if outcome.passed:
            logger.success(f"{scenario.name}: {outcome.message}")
        else:
            logger.failure(f"{scenario.name}: {outcome.error or outcome.message}")

    return outcomes


async def run_scenario(
    browser_manager: BrowserManager,
    scenario: Scenario,
    config: VerifierConfig,
) -> ScenarioOutcome:
    """
    Run one scenario in its own browser context.

    Infrastructure errors are recorded on the outcome, never raised.
    """
    logger = get_logger()
    started_at = datetime.now()
    start = time.time()

    context = None
    translator: Optional[TranslatorContext] = None

    try:
        context = await browser_manager.create_context()
        translator = TranslatorContext(context, config, scenario_id=f"{scenario.suite.value}_{scenario.id}")

        if scenario.suite == Suite.MOCK:
            await translator.load_html(MOCK_TRANSLATOR_HTML)
        else:
            await translator.open_translator()

        observation, strategy = await observe(translator, scenario, config)
        passed, message = evaluate(scenario, observation)

        if not passed:
            await translator.save_debug_info("assertion_failed")

        return ScenarioOutcome(
            scenario=scenario,
            passed=passed,
            actual=observation.actual,
            strategy=strategy,
            message=message,
            started_at=started_at,
            duration_seconds=time.time() - start,
        )

    except Exception as e:
        logger.error(f"Error running {scenario.id}: {e}", exc_info=config.debug_mode)
        if translator:
            await translator.save_debug_info("error")

        return ScenarioOutcome(
            scenario=scenario,
            passed=False,
            error=str(e),
            started_at=started_at,
            duration_seconds=time.time() - start,
        )

    finally:
        if translator:
            await translator.close()
        if context:
            await browser_manager.close_context(context)


async def observe(
    translator: TranslatorContext,
    scenario: Scenario,
    config: VerifierConfig,
) -> Tuple[Observation, ResolutionStrategy]:
    """Submit the scenario input and read back what the page shows."""
    await submit(translator, scenario, scenario.input)

    if scenario.check == CheckKind.VISIBLE:
        await translator.settle(scenario.settle_ms)
        visible = await translator.is_visible(scenario.output_selector or config.text_field_selector)
        return Observation(visible=visible), ResolutionStrategy.UNRESOLVED

    if scenario.check == CheckKind.CHANGES_ON_APPEND:
        first = await translator.resolve_output(scenario.input, scenario.settle_ms)

        appended = scenario.input + (scenario.append_text or "")
        await submit(translator, scenario, scenario.append_text or "", typed=True)
        second = await translator.resolve_output(appended, scenario.settle_ms)

        return Observation(actual=second.text, previous=first.text), second.strategy

    if scenario.check == CheckKind.CLEARS:
        before = await translator.resolve_output(scenario.input, scenario.settle_ms)

        await translator.fill_input("", scenario.input_selector)
        after = await read_cleared(translator, scenario, config)

        return Observation(actual=after, previous=before.text), before.strategy

    if scenario.read_mode == ReadMode.SECOND_FIELD:
        await translator.settle(scenario.settle_ms)
        actual = await translator.read_field(1, config.input_selector)
        return Observation(actual=actual), ResolutionStrategy.SECOND_FIELD

    result = await translator.resolve_output(scenario.input, scenario.settle_ms)
    return Observation(actual=result.text), result.strategy


async def submit(translator: TranslatorContext, scenario: Scenario, text: str, typed: bool = False):
    """Put text into the input surface, by fill or key-by-key typing."""
    if typed or scenario.action == InputAction.TYPE:
        await translator.type_input(text, scenario.input_selector)
    else:
        await translator.fill_input(text, scenario.input_selector)


async def read_cleared(translator: TranslatorContext, scenario: Scenario, config: VerifierConfig) -> str:
    """Read the output after the input was cleared."""
    if scenario.read_mode == ReadMode.SECOND_FIELD:
        await translator.settle(1000)
        return await translator.read_field(1, config.text_field_selector)

    result = await translator.resolve_output("", scenario.settle_ms)
    return result.text
