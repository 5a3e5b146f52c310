"""
Score a review against the social sentiment lexicon.

Usage:
  socialsent [REVIEW]
  python -m socialsent [REVIEW]

Prints one `word: score, accumulated` line per token, then the total and
the 1-5 star rating. Exits non-zero if the lexicon or review can't be read.
"""
import argparse, logging, sys

from .config import SETTINGS
from .lexicon_model import Lexicon, LexiconError
from .model import DocumentError, format_step, score_document
from .policy import star_rating

TRACE_HEADER = "[word: current_score, accumulated_score]"

def main(argv=None):
    ap = argparse.ArgumentParser(prog="socialsent", description="Lexicon-based sentiment score and star rating for a text file.")
    ap.add_argument("review", nargs="?", default=SETTINGS.review_path,
                    help=f"Path to the document to score (default: {SETTINGS.review_path})")
    args = ap.parse_args(argv)

    logging.basicConfig(level=SETTINGS.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        lexicon = Lexicon.from_file(SETTINGS.lexicon_path)
    except LexiconError as e:
        sys.exit(f"Error: {e}")

    print(TRACE_HEADER)
    try:
        result = score_document(args.review, lexicon, on_step=lambda step: print(format_step(step)))
    except DocumentError as e:
        sys.exit(f"Error: {e}")

    stars = star_rating(result.total)
    print(f"\n{args.review} score: {result.total:.2f}")
    print(f"{args.review} Stars: {stars}")
    return 0

if __name__ == "__main__":
    main()
