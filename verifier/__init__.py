"""
Browser-driven verification of a Singlish → Sinhala transliteration page.
"""

__version__ = "1.0.0"
