"""
Shared utilities for RESUMEFORGE.

Common functionality used across contexts:
- Text predicates and word counting
- Timestamps
- Logger setup
- Report formatting
"""

from resumeforge.utils.text_processing import count_words, is_blank
from resumeforge.utils.timestamp import now_exact, now_ms

__all__ = ["count_words", "is_blank", "now_exact", "now_ms"]
