"""
Output resolution strategies.

Each strategy takes (snapshot, input_record) and returns the output text or
None when it cannot tell. Strategies are tried in a fixed order by
first_success(); the first one returning a value wins.
"""

import re
from typing import Awaitable, Callable, Optional, Sequence, Tuple

from .snapshot import DocumentSnapshot, SnapshotElement
from ..models import ResolutionStrategy, ScriptClass
from ..utils import get_logger
from ..utils.patterns import OUTPUT_LABEL_PATTERN, is_blank

Strategy = Callable[[DocumentSnapshot, str], Awaitable[Optional[str]]]


async def safe_read(element: SnapshotElement) -> str:
    """Read an element value, treating a failed read as empty."""
    try:
        return await element.read_value() or ""
    except Exception as e:
        get_logger().debug(f"Read failed for {element!r}: {e}")
        return ""


async def safe_script(element: SnapshotElement) -> ScriptClass:
    """Classify an element value, treating a failed read as empty."""
    try:
        return await element.script()
    except Exception as e:
        get_logger().debug(f"Read failed for {element!r}: {e}")
        return ScriptClass.EMPTY


async def distinct_value_scan(snapshot: DocumentSnapshot, input_record: str) -> Optional[str]:
    """First text field holding non-blank text that differs from the input."""
    for field in await snapshot.text_fields():
        value = await safe_read(field)
        if value and value != input_record and not is_blank(value):
            return value
    return None


async def script_signature_scan(snapshot: DocumentSnapshot, input_record: str) -> Optional[str]:
    """First text field holding Sinhala characters that differs from the input."""
    for field in await snapshot.text_fields():
        value = await safe_read(field)
        if value == input_record:
            continue
        if await safe_script(field) in (ScriptClass.SINHALA, ScriptClass.MIXED):
            return value
    return None


async def label_proximity_scan(
    snapshot: DocumentSnapshot,
    input_record: str,
    label_pattern: re.Pattern = OUTPUT_LABEL_PATTERN,
    timeout_ms: int = 5000,
    max_depth: int = 5,
) -> Optional[str]:
    """
    Look for the output field next to a label naming the output language.

    Walks at most max_depth ancestors of the label, nearest first, and takes
    the first field of the first container that holds one. Then re-scans as
    many page fields as that container holds. Any failure here makes the
    strategy inapplicable.
    """
    logger = get_logger()

    try:
        label = await snapshot.find_label(label_pattern, timeout_ms)
        if label is None:
            logger.debug(f"No label matching {label_pattern.pattern!r}")
            return None

        container_fields = []
        for container in await label.ancestors(max_depth):
            container_fields = await container.text_fields()
            if container_fields:
                break

        if not container_fields:
            return None

        value = await safe_read(container_fields[0])
        if value and value != input_record:
            return value

        # Re-scan page fields, bounded by the container field count
        page_fields = await snapshot.text_fields()
        for field in page_fields[:len(container_fields)]:
            value = await safe_read(field)
            if value and value != input_record:
                return value

    except Exception as e:
        logger.debug(f"Label proximity scan inapplicable: {e}")

    return None


async def cardinality_fallback(snapshot: DocumentSnapshot, input_record: str) -> Optional[str]:
    """With exactly two text fields on the page, the second one is the output."""
    fields = await snapshot.text_fields()
    if len(fields) != 2:
        return None

    value = await safe_read(fields[1])
    return value or None


async def editable_region_scan(snapshot: DocumentSnapshot, input_record: str) -> Optional[str]:
    """First contenteditable region with non-blank text differing from the input."""
    for region in await snapshot.editable_regions():
        value = await safe_read(region)
        if value and value != input_record and not is_blank(value):
            return value
    return None


async def first_success(
    strategies: Sequence[Tuple[ResolutionStrategy, Strategy]],
    snapshot: DocumentSnapshot,
    input_record: str,
) -> Tuple[ResolutionStrategy, str]:
    """
    Run strategies strictly in order and return the first answer.

    Returns (UNRESOLVED, "") when none of them produces one.
    """
    logger = get_logger()

    for name, strategy in strategies:
        value = await strategy(snapshot, input_record)
        if not value:
            logger.debug(f"Strategy {name.value} not applicable")
            continue
        logger.debug(f"Output resolved by {name.value}")
        return name, value

    return ResolutionStrategy.UNRESOLVED, ""
