import logging, math, re
from types import MappingProxyType
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional

from .files import InputFileError, read_text

log = logging.getLogger(__name__)

DEFAULT_SCORE = 0.0

# longest leading decimal literal; trailing junk after it is ignored
_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class LexiconError(InputFileError):
    """The lexicon file could not be opened or read."""


def _parse_score(raw: str) -> Optional[float]:
    m = _NUMBER_RE.match(raw)
    if not m:
        return None
    value = float(m.group(1))
    # huge exponents overflow to inf; only finite scores go in the table
    return value if math.isfinite(value) else None


class Lexicon(Mapping):
    """Read-only word -> sentiment score table.

    Keys are kept exactly as written in the source file; callers look up
    lowercase tokens, so mixed-case entries simply never match.
    """

    def __init__(self, weights: Optional[Mapping[str, float]] = None, skipped: int = 0):
        self._weights: Dict[str, float] = dict(weights or {})
        self._skipped = skipped
        self.weights = MappingProxyType(self._weights)

    @property
    def skipped(self) -> int:
        """Number of non-blank source lines that were rejected."""
        return self._skipped

    @classmethod
    def from_file(cls, path: str) -> "Lexicon":
        data = read_text(path, LexiconError)
        lex = cls.parse_lines(data.split("\n"))
        log.info("Loaded %d lexicon entries from %s (%d lines skipped)", len(lex), path, lex.skipped)
        return lex

    @classmethod
    def parse_lines(cls, lines: Iterable[str]) -> "Lexicon":
        """
        Build a lexicon from `word,score[,...]` lines.
        Blank lines are ignored; short lines and unparsable scores are logged
        and skipped. A later line for the same word replaces the earlier one.
        """
        weights: Dict[str, float] = {}
        skipped = 0
        for line in lines:
            line = line.strip()
            if not line:
                continue
            parts = line.split(",")
            if len(parts) < 2:
                log.warning("Skipping malformed line: %s", line)
                skipped += 1
                continue
            score = _parse_score(parts[1])
            if score is None:
                log.warning("Skipping invalid score in line: %s", line)
                skipped += 1
                continue
            weights[parts[0]] = score
        return cls(weights, skipped)

    def score(self, word: str) -> float:
        return self._weights.get(word, DEFAULT_SCORE)

    def __getitem__(self, word: str) -> float:
        return self._weights[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"Lexicon({len(self)} entries)"
