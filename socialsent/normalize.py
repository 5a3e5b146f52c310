"""
Normalization & tokenization helpers.

WHAT:
  - lowercasing and word-run extraction; every token is a maximal run of
    word characters (letters, digits, underscore).

WHY:
  - Punctuation and whitespace never reach the lexicon lookup, so
    "Great!" and "great" score the same.
"""

import re
from typing import List

WORD_RE = re.compile(r"\b\w+\b")

def normalize_text(text: str) -> str:
    return (text or "").lower()

def tokenize(text: str) -> List[str]:
    return WORD_RE.findall(normalize_text(text))
