"""
Output resolver.
Finds the element holding the translated text on a page whose structure is
not known in advance.
"""

import functools
import re
from typing import Optional, Sequence, Tuple

from .snapshot import DocumentSnapshot
from .strategies import (
    Strategy,
    cardinality_fallback,
    distinct_value_scan,
    editable_region_scan,
    first_success,
    label_proximity_scan,
    script_signature_scan,
)
from ..models import ResolutionResult, ResolutionStrategy, VerifierConfig
from ..utils import get_logger
from ..utils.patterns import OUTPUT_LABEL_PATTERN, compile_label_pattern


class OutputResolver:
    """
    Stateless cascade over the resolution strategies.

    Order: distinct value, script signature, label proximity, cardinality,
    editable region. Every content scan skips a verbatim echo of the input;
    the two-field fallback does not, so an output that repeats the input is
    still found there.
    """

    def __init__(
        self,
        label_pattern: re.Pattern = OUTPUT_LABEL_PATTERN,
        label_timeout_ms: int = 5000,
        max_ancestor_depth: int = 5,
    ):
        self.logger = get_logger()
        self.strategies: Tuple[Tuple[ResolutionStrategy, Strategy], ...] = (
            (ResolutionStrategy.DISTINCT_VALUE, distinct_value_scan),
            (ResolutionStrategy.SCRIPT_SIGNATURE, script_signature_scan),
            (
                ResolutionStrategy.LABEL_PROXIMITY,
                functools.partial(
                    label_proximity_scan,
                    label_pattern=label_pattern,
                    timeout_ms=label_timeout_ms,
                    max_depth=max_ancestor_depth,
                ),
            ),
            (ResolutionStrategy.CARDINALITY, cardinality_fallback),
            (ResolutionStrategy.EDITABLE_REGION, editable_region_scan),
        )

    @classmethod
    def from_config(cls, config: VerifierConfig) -> "OutputResolver":
        return cls(
            label_pattern=compile_label_pattern(config.label_pattern),
            label_timeout_ms=config.label_timeout_ms,
            max_ancestor_depth=config.max_ancestor_depth,
        )

    async def resolve(self, snapshot: DocumentSnapshot, input_record: str) -> ResolutionResult:
        """
        Resolve the output text for input_record.

        Args:
            snapshot: Current view of the page
            input_record: Text that was last submitted, may be empty

        Returns:
            ResolutionResult; unresolved (empty text) when no strategy succeeds
        """
        strategy, text = await first_success(self.strategies, snapshot, input_record)

        if strategy == ResolutionStrategy.UNRESOLVED:
            self.logger.debug("No distinguishable output found")
            return ResolutionResult.unresolved()

        return ResolutionResult(text=text, strategy=strategy)

    def strategy_names(self) -> Sequence[ResolutionStrategy]:
        return [name for name, _ in self.strategies]


async def resolve_output(
    snapshot: DocumentSnapshot,
    input_record: str,
    resolver: Optional[OutputResolver] = None,
) -> str:
    """Resolve and return only the text (empty string when unresolved)."""
    resolver = resolver or OutputResolver()
    result = await resolver.resolve(snapshot, input_record)
    return result.text
