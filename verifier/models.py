"""
Data models for the translator verification suite.
All models use Pydantic for validation and serialization.
"""

from typing import Optional, List
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class ElementKind(str, Enum):
    """Kind of a text-bearing element on the page."""
    TEXT_INPUT = "text_input"   # textarea / input[type=text]
    READ_ONLY = "read_only"     # readonly textarea or output surface
    EDITABLE = "editable"       # contenteditable region


class ScriptClass(str, Enum):
    """Script classification of an element value."""
    EMPTY = "empty"
    LATIN = "latin"
    SINHALA = "sinhala"
    MIXED = "mixed"


class ResolutionStrategy(str, Enum):
    """Cascade step that produced a resolution result."""
    DISTINCT_VALUE = "distinct_value"
    SCRIPT_SIGNATURE = "script_signature"
    LABEL_PROXIMITY = "label_proximity"
    CARDINALITY = "cardinality"
    EDITABLE_REGION = "editable_region"
    SECOND_FIELD = "second_field"
    UNRESOLVED = "unresolved"


class ResolutionResult(BaseModel):
    """Outcome of one resolution attempt: one confident answer or none."""
    text: str = ""
    strategy: ResolutionStrategy = ResolutionStrategy.UNRESOLVED

    @property
    def resolved(self) -> bool:
        """Check if a text value was resolved."""
        return bool(self.text)

    @classmethod
    def unresolved(cls) -> "ResolutionResult":
        return cls()


class Suite(str, Enum):
    """Scenario suite, by the page it runs against."""
    LIVE = "live"
    MOCK = "mock"


class Category(str, Enum):
    """Scenario category, taken from the scenario ID prefix."""
    POS_FUN = "Pos_Fun"
    NEG_FUN = "Neg_Fun"
    POS_UI = "Pos_UI"


class CheckKind(str, Enum):
    """How a scenario compares the resolved output to its expectation."""
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    NOT_EMPTY = "not_empty"
    CONTAINS = "contains"
    MATCHES = "matches"
    VISIBLE = "visible"
    CHANGES_ON_APPEND = "changes_on_append"
    CLEARS = "clears"


class InputAction(str, Enum):
    """How the input text is submitted."""
    FILL = "fill"
    TYPE = "type"


class ReadMode(str, Enum):
    """How the scenario reads the output back."""
    RESOLVE = "resolve"             # full resolver cascade
    SECOND_FIELD = "second_field"   # read the second text field directly


class Scenario(BaseModel):
    """A single (input, expectation) test case."""
    id: str
    title: str
    suite: Suite
    input: str
    expected: Optional[str] = None
    check: CheckKind = CheckKind.EQUALS
    action: InputAction = InputAction.FILL
    read_mode: ReadMode = ReadMode.RESOLVE

    # Known element selectors, when the page structure is fixed
    input_selector: Optional[str] = None
    output_selector: Optional[str] = None

    # Follow-up text for CHANGES_ON_APPEND scenarios
    append_text: Optional[str] = None

    # Milliseconds to let the page react before reading output
    settle_ms: Optional[int] = None

    @field_validator('id')
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not any(v.startswith(c.value + "_") for c in Category):
            raise ValueError(f"Unknown scenario category in ID: {v}")
        return v

    @property
    def category(self) -> Category:
        return Category(self.id.rsplit("_", 1)[0])

    @property
    def name(self) -> str:
        return f"{self.id} - {self.title}"


class ScenarioOutcome(BaseModel):
    """Result of running a single scenario."""
    scenario: Scenario
    passed: bool
    actual: Optional[str] = None
    strategy: ResolutionStrategy = ResolutionStrategy.UNRESOLVED
    message: Optional[str] = None
    error: Optional[str] = None

    started_at: Optional[datetime] = None
    duration_seconds: Optional[float] = None


class SuiteReport(BaseModel):
    """All outcomes of one run."""
    suites: List[Suite] = Field(default_factory=list)
    translator_url: Optional[str] = None
    outcomes: List[ScenarioOutcome] = Field(default_factory=list)
    duration_seconds: Optional[float] = None

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.passed)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


class VerifierConfig(BaseModel):
    """Configuration for a verification run."""

    # Target
    translator_url: str = "https://www.swifttranslator.com/"
    input_selector: str = 'textarea, input[type="text"]'
    text_field_selector: str = "textarea"
    editable_selector: str = '[contenteditable="true"]'

    # Browser
    headless: bool = True
    page_timeout_ms: int = 30000
    retry_attempts: int = 3
    locale: str = "en-US"
    user_agent: Optional[str] = None

    # Resolver
    settle_ms: int = 2000
    label_pattern: str = "Sinhala"
    label_timeout_ms: int = 5000
    max_ancestor_depth: int = 5
    type_delay_ms: int = 100

    # Report
    report_file: Optional[str] = "./output/verification-report.md"
    timezone: str = "Asia/Colombo"

    # Debug
    debug_mode: bool = False
    debug_save_screenshots: bool = True
    debug_save_html: bool = True
    debug_log_file: str = "./debug/debug.log"

    @field_validator('max_ancestor_depth')
    @classmethod
    def validate_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_ancestor_depth must be at least 1")
        return v
