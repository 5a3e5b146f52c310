"""Coordinates tokenize -> look up -> accumulate for one document.
Each token produces a TokenScore so callers can print the running trace."""

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional

from .files import InputFileError, read_text
from .lexicon_model import Lexicon
from .normalize import tokenize


class DocumentError(InputFileError):
    """The document to score could not be opened or read."""


@dataclass(frozen=True)
class TokenScore:
    word: str
    score: float
    total: float


@dataclass
class DocumentScore:
    path: Optional[str]
    total: float = 0.0
    steps: List[TokenScore] = field(default_factory=list)

    @property
    def words(self) -> List[str]:
        return [s.word for s in self.steps]


StepCallback = Callable[[TokenScore], None]


def format_step(step: TokenScore) -> str:
    return f"{step.word}: {step.score:.2f}, {step.total:.2f}"


def iter_scores(tokens: Iterable[str], lexicon: Lexicon) -> Iterator[TokenScore]:
    total = 0.0
    for tok in tokens:
        s = lexicon.score(tok)
        total += s
        yield TokenScore(tok, s, total)


def score_text(text: str, lexicon: Lexicon, on_step: Optional[StepCallback] = None,
               path: Optional[str] = None) -> DocumentScore:
    """
    Sum lexicon scores over every token of `text`, left to right.
    Unknown tokens count as 0.0. `on_step` sees each TokenScore as it is made.
    """
    result = DocumentScore(path=path)
    for step in iter_scores(tokenize(text), lexicon):
        result.steps.append(step)
        result.total = step.total
        if on_step is not None:
            on_step(step)
    return result


def score_document(path: str, lexicon: Lexicon, on_step: Optional[StepCallback] = None) -> DocumentScore:
    text = read_text(path, DocumentError)
    return score_text(text, lexicon, on_step=on_step, path=path)
