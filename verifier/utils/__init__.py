"""
Utility modules for the verifier.
"""

from .logger import VerifierLogger, get_logger, init_logger
from .patterns import (
    SINHALA_PATTERN,
    OUTPUT_LABEL_PATTERN,
    classify_script,
    compile_label_pattern,
    has_sinhala,
    is_blank,
)

__all__ = [
    'VerifierLogger',
    'get_logger',
    'init_logger',
    'SINHALA_PATTERN',
    'OUTPUT_LABEL_PATTERN',
    'classify_script',
    'compile_label_pattern',
    'has_sinhala',
    'is_blank',
]
