"""Lexicon-based sentiment scoring with a 1-5 star rating."""

from .files import InputFileError
from .lexicon_model import Lexicon, LexiconError
from .model import DocumentError, DocumentScore, TokenScore, score_document, score_text
from .policy import star_rating

__version__ = "0.1.0"
