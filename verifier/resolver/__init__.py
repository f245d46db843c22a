"""
Output resolution.
Locates the element holding the translated text on a rendered page.
"""

from .snapshot import DocumentSnapshot, SnapshotElement, Node, TreeSnapshot, textarea, editable
from .strategies import (
    safe_read,
    safe_script,
    distinct_value_scan,
    script_signature_scan,
    label_proximity_scan,
    cardinality_fallback,
    editable_region_scan,
    first_success,
)
from .resolver import OutputResolver, resolve_output

__all__ = [
    'DocumentSnapshot',
    'SnapshotElement',
    'Node',
    'TreeSnapshot',
    'textarea',
    'editable',
    'safe_read',
    'safe_script',
    'distinct_value_scan',
    'script_signature_scan',
    'label_proximity_scan',
    'cardinality_fallback',
    'editable_region_scan',
    'first_success',
    'OutputResolver',
    'resolve_output',
]
