import os
import pytest
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from git import Repo

from gitconvcommit.prompter import Prompter, Validator, match_choice
from gitconvcommit.prompts import VALUE_REQUIRED_MESSAGE


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with one commit."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit")

        yield tmp_dir


@pytest.fixture
def staged_git_repo(temp_git_repo):
    """A repository with a modification staged on top of the initial commit."""
    repo = Repo(temp_git_repo)
    test_file = Path(temp_git_repo) / "test.txt"
    test_file.write_text("Modified content")
    repo.index.add(["test.txt"])
    yield temp_git_repo


@pytest.fixture
def empty_git_repo():
    """Create a temporary git repository without any commits."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        Repo.init(tmp_dir)
        yield tmp_dir


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep local GIT_CONV_COMMIT_* settings out of the tests."""
    for name in list(os.environ):
        if name.startswith("GIT_CONV_COMMIT_"):
            monkeypatch.delenv(name)
    yield


class ScriptedPrompter(Prompter):
    """Prompter answering from a fixed script.

    Free-text answers rejected by the validator are recorded in ``errors``
    and the next scripted answer is tried, the way a terminal re-prompts.
    """

    def __init__(self, answers: Sequence, editor_text: Optional[str] = None):
        self.answers = list(answers)
        self.editor_text = editor_text
        self.prompts: List[str] = []
        self.errors: List[str] = []
        self.editor_seeds: List[str] = []

    def _next(self, prompt: str):
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt: {prompt}")
        return self.answers.pop(0)

    def single_choice(self, prompt: str, labels: Sequence[str]) -> int:
        answer = self._next(prompt)
        if isinstance(answer, int):
            return answer
        return match_choice(answer, labels)

    def free_text(
        self, prompt: str, allow_empty: bool = False, validator: Optional[Validator] = None
    ) -> str:
        while True:
            answer = self._next(prompt)
            if validator is not None:
                is_valid, message = validator(answer)
                if not is_valid:
                    self.errors.append(message)
                    continue
            if not answer and not allow_empty:
                self.errors.append(VALUE_REQUIRED_MESSAGE)
                continue
            return answer

    def integer(self, prompt: str, minimum: int = 0) -> int:
        return int(self._next(prompt))

    def confirm(self, prompt: str, default: bool = False) -> bool:
        answer = self._next(prompt)
        return default if answer is None else answer

    def external_editor(self, seed: str) -> Optional[str]:
        self.editor_seeds.append(seed)
        return self.editor_text


@pytest.fixture
def scripted_prompter():
    return ScriptedPrompter
