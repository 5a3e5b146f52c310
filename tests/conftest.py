import pytest

from socialsent.lexicon_model import Lexicon


@pytest.fixture
def lexicon():
    return Lexicon({"good": 2.0, "bad": -3.0})


@pytest.fixture
def write(tmp_path):
    def _write(name, text):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return str(p)
    return _write
