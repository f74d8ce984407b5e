import pytest

from drillbook.ui import success, use_emoji, warn


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)


def test_use_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert use_emoji() is True
    monkeypatch.setenv("NO_EMOJI", "1")
    assert use_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Compilation of intro1 failed")
    assert capsys.readouterr().out == "! Compilation of intro1 failed\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("Ran intro1 with errors")
    assert capsys.readouterr().out == "⚠️  Ran intro1 with errors\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran intro1")
    assert capsys.readouterr().out == "✓ Successfully ran intro1\n"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("Successfully ran intro1")
    assert capsys.readouterr().out == "✅ Successfully ran intro1\n"


def test_message_markup_is_printed_verbatim(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("[bold]x[/bold] :smile:")
    assert capsys.readouterr().out == "! [bold]x[/bold] :smile:\n"