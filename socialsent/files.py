"""Text file reads shared by the lexicon loader and the scorer."""

from typing import Type


class InputFileError(OSError):
    """An input file could not be opened or read."""

    def __init__(self, path: str, reason: str = "not found or unreadable"):
        super().__init__(f"{path} {reason}.")
        self.path = path


def read_text(path: str, error: Type[InputFileError] = InputFileError) -> str:
    """
    Read a whole file as UTF-8. A leading BOM is dropped and undecodable
    bytes become U+FFFD, so only OS-level failures raise `error`.
    """
    try:
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise error(path) from e
