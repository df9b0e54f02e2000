"""Interactive construction of issue references."""
from typing import List

from .models import (
    Issue,
    IssueKeyword,
    LinkedIssue,
    MultiIssue,
    SingleIssue,
    link_issue,
)
from .prompter import Prompter
from .prompts import (
    ANOTHER_ISSUE_PROMPT,
    ISSUE_NUMBER_PROMPT,
    KEYWORD_PROMPT,
    MULTI_ISSUE_PROMPT,
    OWNER_PROMPT,
    REPO_PROMPT,
)

KEYWORDS: List[IssueKeyword] = list(IssueKeyword)


class IssueBuilder:
    """Asks the user which issue(s) a commit closes."""

    def __init__(self, prompter: Prompter):
        self.prompter = prompter

    def build(self) -> Issue:
        if self.prompter.confirm(MULTI_ISSUE_PROMPT, default=False):
            return self.build_multi()
        return self.build_single()

    def build_single(self) -> SingleIssue:
        return SingleIssue(issue=self.build_linked_issue())

    def build_multi(self) -> MultiIssue:
        issues = [self.build_linked_issue()]
        while self.prompter.confirm(ANOTHER_ISSUE_PROMPT, default=False):
            issues.append(self.build_linked_issue())
        return MultiIssue(issues=issues)

    def build_linked_issue(self) -> LinkedIssue:
        """Prompt for keyword, owner, repo and number of one issue.

        Raises:
            IssueConstructionError: If only one of owner and repo was given.
        """
        choice = self.prompter.single_choice(KEYWORD_PROMPT, [str(keyword) for keyword in KEYWORDS])
        keyword = KEYWORDS[choice]
        owner = self.prompter.free_text(OWNER_PROMPT, allow_empty=True).strip()
        repo = self.prompter.free_text(REPO_PROMPT, allow_empty=True).strip()
        number = self.prompter.integer(ISSUE_NUMBER_PROMPT, minimum=0)
        return link_issue(keyword, number, owner, repo)
