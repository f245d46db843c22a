"""
Regular expression patterns for output resolution.
"""

import re

from ..models import ScriptClass

# ============================================================
# SCRIPT PATTERNS
# ============================================================

# Sinhala Unicode block (U+0D80 - U+0DFF)
SINHALA_PATTERN = re.compile(r'[\u0D80-\u0DFF]')

# Latin letters as typed in Singlish input
LATIN_LETTER_PATTERN = re.compile(r'[A-Za-z]')

# ============================================================
# LABEL PATTERNS
# ============================================================

# Default label naming the output region
OUTPUT_LABEL_PATTERN = re.compile(r'Sinhala', re.IGNORECASE)


def compile_label_pattern(label: str) -> re.Pattern:
    """Build a case-insensitive pattern for a configured label."""
    return re.compile(re.escape(label), re.IGNORECASE)


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def has_sinhala(text: str) -> bool:
    """Check if text contains any character of the Sinhala block."""
    if not text:
        return False
    return SINHALA_PATTERN.search(text) is not None


def classify_script(text: str) -> ScriptClass:
    """Classify a value as empty, latin, sinhala or mixed."""
    if not text or not text.strip():
        return ScriptClass.EMPTY

    sinhala = has_sinhala(text)
    latin = LATIN_LETTER_PATTERN.search(text) is not None

    if sinhala and latin:
        return ScriptClass.MIXED
    if sinhala:
        return ScriptClass.SINHALA
    return ScriptClass.LATIN


def is_blank(text: str) -> bool:
    """Check if text is empty or whitespace only."""
    return not text or not text.strip()
