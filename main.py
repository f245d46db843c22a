#!/usr/bin/env python3
"""
Singlish → Sinhala Translator Verification
Main entry point for the verifier.
"""

from verifier.cli import main

if __name__ == "__main__":
    main()
