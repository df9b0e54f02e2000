"""Commit message formatting."""
from ..models import DEFAULT_ISSUE_SEPARATOR, CommitDraft

MESSAGE_TEMPLATE = "{header}\n\n{long_description}\n\n{issue}\n{breaking}"
BREAKING_CHANGE_PREFIX = "BREAKING CHANGE: "


class CommitMessageFormatter:
    """Turns a commit draft into the final message text.

    The blank-line slots for the long description and issue line are always
    present, even when those sections are empty.
    """

    def __init__(self, issue_separator: str = DEFAULT_ISSUE_SEPARATOR):
        self.issue_separator = issue_separator

    def format_header(self, draft: CommitDraft) -> str:
        header = draft.commit_type.token
        if draft.scope:
            header += f"({draft.scope})"
        return f"{header}: {draft.short_description}"

    def format_breaking(self, draft: CommitDraft) -> str:
        if draft.breaking_change is None:
            return ""
        return f"{BREAKING_CHANGE_PREFIX}{draft.breaking_change}"

    def format(self, draft: CommitDraft) -> str:
        issue = draft.issue.render(self.issue_separator) if draft.issue else ""
        return MESSAGE_TEMPLATE.format(
            header=self.format_header(draft),
            long_description=draft.long_description,
            issue=issue,
            breaking=self.format_breaking(draft),
        )
