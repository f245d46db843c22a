"""
Output generation module.
Builds the markdown verification report.
"""

from .template import MarkdownTemplateBuilder
from .writer import MarkdownWriter

__all__ = [
    'MarkdownTemplateBuilder',
    'MarkdownWriter',
]
