"""
Tests for the moodcode-hook entry point: exit codes, APPROVED_MESSAGE, error logs.

Git and the LLM are replaced with fakes via monkeypatch.
Run with:
    pytest tests/test_cli.py -v
"""

import importlib

import pytest

from moodcode.cli import APPROVED_PREFIX, main
from moodcode.config import Config
from moodcode.errors import LLMError

# moodcode.cli re-exports main(), which shadows the submodule in dotted lookups
cli_main = importlib.import_module("moodcode.cli.main")


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "Logs"


@pytest.fixture
def wire(monkeypatch, log_dir, make_diff_source, make_rewriter):
    """Patch config, git and rewriter lookups in cli.main; returns the fake rewriter."""
    for name in ("MOODCODE_PROVIDER", "MOODCODE_MODEL", "MOODCODE_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)

    def _wire(diff_source=None, rewriter=None):
        rewriter = rewriter or make_rewriter()
        source = diff_source or make_diff_source()
        monkeypatch.setattr(cli_main, "load_config", lambda: Config(log_dir=str(log_dir)))
        monkeypatch.setattr(cli_main, "GitAnalyzer", lambda: source)
        monkeypatch.setattr(cli_main, "get_rewriter", lambda **kwargs: rewriter)
        return rewriter
    return _wire


def _approved_line(out: str) -> str:
    lines = [line for line in out.splitlines() if line.startswith(APPROVED_PREFIX)]
    assert len(lines) == 1
    assert out.rstrip().splitlines()[-1] == lines[0]
    return lines[0][len(APPROVED_PREFIX):]


# ---------------------------------------------------------------------------
# Success paths
# ---------------------------------------------------------------------------

class TestApprovedMessage:

    def test_good_message_kept(self, wire, capsys):
        rewriter = wire()
        code = main(["Add", "password", "strength", "validation", "to", "registration", "form", "--yes"])

        assert code == 0
        assert _approved_line(capsys.readouterr().out) == "Add password strength validation to registration form"
        assert rewriter.calls == []

    def test_bad_message_replaced(self, wire, capsys):
        wire()
        code = main(["fix", "--yes"])

        assert code == 0
        assert _approved_line(capsys.readouterr().out) == "fix(auth): return 401 when login session is missing"

    def test_diff_based_without_message(self, wire, capsys):
        rewriter = wire()
        code = main(["--diff-based", "--yes"])

        assert code == 0
        assert rewriter.calls[0][0] == "generate_from_diff"
        assert _approved_line(capsys.readouterr().out) == "fix(auth): return 401 when login session is missing"

    def test_no_arguments_prints_usage(self, wire, capsys):
        wire()
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "usage:" in out
        assert APPROVED_PREFIX not in out

    def test_display_config(self, wire, capsys):
        wire()
        assert main(["--config"]) == 0
        assert "Current Configuration" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Fatal paths: exit 1 plus an error log
# ---------------------------------------------------------------------------

class TestFatalErrors:

    def test_no_staged_changes(self, wire, make_diff_source, capsys, log_dir):
        wire(diff_source=make_diff_source(files=[]))
        code = main(["fix"])

        captured = capsys.readouterr()
        assert code == 1
        assert "No staged changes" in captured.err
        assert APPROVED_PREFIX not in captured.out
        assert len(list(log_dir.glob("error_*.log"))) == 1

    def test_missing_api_key(self, monkeypatch, capsys, log_dir):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        monkeypatch.delenv("MOODCODE_PROVIDER", raising=False)
        monkeypatch.setattr(cli_main, "load_config", lambda: Config(log_dir=str(log_dir)))

        def no_git():
            raise AssertionError("git must not be touched before credentials are checked")
        monkeypatch.setattr(cli_main, "GitAnalyzer", no_git)

        code = main(["fix"])

        assert code == 1
        assert "GROQ_API_KEY" in capsys.readouterr().err
        log_text = next(log_dir.glob("error_*.log")).read_text(encoding="utf-8")
        assert "GROQ_API_KEY" in log_text

    def test_transport_failure_outside_rewriter(self, wire, monkeypatch, capsys):
        wire()

        def unreachable(**kwargs):
            raise LLMError("Ollama not running. Start with: ollama serve")
        monkeypatch.setattr(cli_main, "get_rewriter", unreachable)

        assert main(["fix", "-p", "ollama"]) == 1
        assert "Failed to communicate with AI service" in capsys.readouterr().err

    def test_unexpected_error(self, wire, monkeypatch, capsys, log_dir):
        wire()

        def boom():
            raise RuntimeError("boom")
        monkeypatch.setattr(cli_main, "GitAnalyzer", boom)

        assert main(["fix"]) == 1
        captured = capsys.readouterr()
        assert "An unexpected error occurred: boom" in captured.err
        assert "error log has been saved" in captured.err
        assert "RuntimeError: boom" in next(log_dir.glob("error_*.log")).read_text(encoding="utf-8")
