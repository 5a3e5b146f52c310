import logging

import pytest

from socialsent import cli
from socialsent.config import Settings

@pytest.fixture
def settings(tmp_path, monkeypatch):
    s = Settings(
        lexicon_path=str(tmp_path / "socialsent.csv"),
        review_path=str(tmp_path / "review.txt"),
        log_level=logging.WARNING,
    )
    monkeypatch.setattr(cli, "SETTINGS", s)
    return s

def test_end_to_end_default_review(settings, capsys):
    with open(settings.lexicon_path, "w", encoding="utf-8") as f:
        f.write("good,2.0\nbad,-3.0\n")
    with open(settings.review_path, "w", encoding="utf-8") as f:
        f.write("good bad good")

    assert cli.main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[word: current_score, accumulated_score]",
        "good: 2.00, 2.00",
        "bad: -3.00, -1.00",
        "good: 2.00, 1.00",
        "",
        f"{settings.review_path} score: 1.00",
        f"{settings.review_path} Stars: 4",
    ]

def test_explicit_review_argument(settings, tmp_path, capsys):
    with open(settings.lexicon_path, "w", encoding="utf-8") as f:
        f.write("awful,-4\nterrible,-2.5\n")
    other = tmp_path / "other.txt"
    other.write_text("Awful, just terrible. Unknown words!", encoding="utf-8")

    cli.main([str(other)])
    out = capsys.readouterr().out
    assert "unknown: 0.00, -6.50" in out
    assert f"{other} score: -6.50" in out
    assert f"{other} Stars: 1" in out

def test_malformed_lines_do_not_abort(settings, capsys, caplog):
    with open(settings.lexicon_path, "w", encoding="utf-8") as f:
        f.write("onlyoneword\nbad,notanumber\nnice,1\n")
    with open(settings.review_path, "w", encoding="utf-8") as f:
        f.write("nice")

    with caplog.at_level(logging.WARNING):
        cli.main([])
    assert "Stars: 4" in capsys.readouterr().out
    assert "Skipping malformed line: onlyoneword" in caplog.text

def test_missing_lexicon_exits_nonzero(settings, capsys):
    with open(settings.review_path, "w", encoding="utf-8") as f:
        f.write("good")

    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code not in (0, None)
    assert "socialsent.csv not found or unreadable" in str(exc.value.code)
    assert "Stars" not in capsys.readouterr().out

def test_missing_review_exits_nonzero(settings, capsys):
    with open(settings.lexicon_path, "w", encoding="utf-8") as f:
        f.write("good,1\n")

    with pytest.raises(SystemExit) as exc:
        cli.main(["does-not-exist.txt"])
    assert "does-not-exist.txt not found or unreadable" in str(exc.value.code)
    assert "Stars" not in capsys.readouterr().out
