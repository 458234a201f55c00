"""Shared fakes: diff source, rewriter and LLM client test doubles."""

import re

import pytest

from moodcode.llm.base import CommitRewriter, LLMClient, LLMResponse

ANSI_RE = re.compile(r'\033\[[0-9;]*m')

LOGIN_DIFF = (
    "diff --git a/Auth/LoginController.cs b/Auth/LoginController.cs\n"
    "--- a/Auth/LoginController.cs\n"
    "+++ b/Auth/LoginController.cs\n"
    "@@ -40,6 +40,9 @@ public IActionResult Login(LoginModel model)\n"
    "+    if (session == null)\n"
    "+        return Unauthorized();\n"
)


class FakeDiffSource:
    def __init__(self, files=None, diff=LOGIN_DIFF):
        self.files = ["Auth/LoginController.cs"] if files is None else files
        self.diff = diff

    def get_repository_root(self) -> str:
        return "/fake/repo"

    def has_staged_changes(self) -> bool:
        return bool(self.files)

    def get_modified_files(self) -> list[str]:
        return list(self.files)

    def get_staged_diff(self) -> str:
        return self.diff


class FakeRewriter(CommitRewriter):
    def __init__(self, suggestion="fix(auth): return 401 when login session is missing"):
        self.suggestion = suggestion
        self.calls = []

    def rewrite(self, diff_text, current_message):
        self.calls.append(("rewrite", diff_text, current_message))
        return self.suggestion

    def generate_from_diff(self, diff_text):
        self.calls.append(("generate_from_diff", diff_text))
        return self.suggestion


class FakeClient(LLMClient):
    """Returns canned content, or raises the given exception."""

    def __init__(self, content="", error=None):
        self.content = content
        self.error = error
        self.prompts = []

    @property
    def name(self) -> str:
        return "Fake (test)"

    def generate(self, prompt: str) -> LLMResponse:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, model="fake", tokens_used=12)


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def make_diff_source():
    return FakeDiffSource


@pytest.fixture
def make_rewriter():
    return FakeRewriter


@pytest.fixture
def make_client():
    return FakeClient


@pytest.fixture
def answer_with(monkeypatch):
    """Feed scripted answers to input(); an exception instance is raised instead."""
    def _answer(*answers):
        queue = list(answers)

        def fake_input(prompt=""):
            answer = queue.pop(0)
            if isinstance(answer, BaseException):
                raise answer
            return answer

        monkeypatch.setattr("builtins.input", fake_input)
    return _answer


@pytest.fixture
def login_diff():
    return LOGIN_DIFF
