"""Shared models for git-conv-commit."""
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .exceptions import IssueConstructionError

DEFAULT_ISSUE_SEPARATOR = ", "


class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    CHORE = "chore"

    @property
    def description(self) -> str:
        return COMMIT_TYPE_DESCRIPTIONS[self]

    @property
    def label(self) -> str:
        """Text shown in the selection list, e.g. ``feat: A new feature``."""
        return f"{self.value}: {self.description}"

    @property
    def token(self) -> str:
        """Prefix used in the commit header: the label up to the first colon."""
        return self.label.split(":", 1)[0]

    def __str__(self) -> str:
        return self.label


COMMIT_TYPE_DESCRIPTIONS = {
    CommitType.FEAT: "A new feature",
    CommitType.FIX: "A bug fix",
    CommitType.DOCS: "Documentation only changes",
    CommitType.STYLE: "Changes that do not affect the meaning of the code",
    CommitType.REFACTOR: "A code change that neither fixes a bug nor adds a feature",
    CommitType.PERF: "A code change that improves performance",
    CommitType.TEST: "Adding missing or correcting existing tests",
    CommitType.CHORE: "Changes that don't modify src files",
}


class IssueKeyword(str, Enum):
    """Closing verbs understood by issue trackers.

    ``Resolves`` and ``Resolved`` keep their capital letter.
    """

    CLOSE = "close"
    CLOSES = "closes"
    CLOSED = "closed"
    FIX = "fix"
    FIXES = "fixes"
    FIXED = "fixed"
    RESOLVE = "resolve"
    RESOLVES = "Resolves"
    RESOLVED = "Resolved"

    def __str__(self) -> str:
        return self.value


class SameRepoIssue(BaseModel):
    keyword: IssueKeyword
    number: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.keyword.value} #{self.number}"


class DifferentRepoIssue(BaseModel):
    keyword: IssueKeyword
    number: int = Field(ge=0)
    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.keyword.value} {self.owner}/{self.repo}#{self.number}"


LinkedIssue = Union[SameRepoIssue, DifferentRepoIssue]


def link_issue(keyword: IssueKeyword, number: int, owner: str = "", repo: str = "") -> LinkedIssue:
    """Build a linked issue from prompt answers.

    Both ``owner`` and ``repo`` empty refers to the current repository, both
    set refers to another one. Anything else is rejected.

    Raises:
        IssueConstructionError: If only one of ``owner`` and ``repo`` is set.
    """
    if not owner and not repo:
        return SameRepoIssue(keyword=keyword, number=number)
    if owner and repo:
        return DifferentRepoIssue(keyword=keyword, number=number, owner=owner, repo=repo)
    missing = "repository name" if owner else "repository owner"
    raise IssueConstructionError(
        f"Issue in another repository needs both owner and repository name (missing {missing})"
    )


class SingleIssue(BaseModel):
    issue: LinkedIssue

    def render(self, separator: str = DEFAULT_ISSUE_SEPARATOR) -> str:
        return str(self.issue)

    def __str__(self) -> str:
        return self.render()


class MultiIssue(BaseModel):
    issues: List[LinkedIssue] = Field(min_length=1)

    def render(self, separator: str = DEFAULT_ISSUE_SEPARATOR) -> str:
        return separator.join(str(issue) for issue in self.issues)

    def __str__(self) -> str:
        return self.render()


Issue = Union[SingleIssue, MultiIssue]


class CommitDraft(BaseModel):
    """Answers collected from the user for a single commit."""

    commit_type: CommitType
    scope: str = ""
    short_description: str
    long_description: str = ""
    breaking_change: Optional[str] = None
    issue: Optional[Issue] = None
