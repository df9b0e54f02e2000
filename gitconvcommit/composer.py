"""Prompt flow that turns user answers into a commit message."""
from typing import List, Optional

from .commit_message import CommitMessageFormatter, ScopeValidator, ShortDescriptionValidator
from .config import Config
from .exceptions import NoInputError
from .issue import IssueBuilder
from .models import CommitDraft, CommitType, Issue
from .prompter import Prompter
from .prompts import (
    AFFECTS_ISSUE_PROMPT,
    BREAKING_CHANGE_EDITOR_SEED,
    BREAKING_CHANGE_PROMPT,
    LONG_DESCRIPTION_PROMPT,
    OPTIONAL_SCOPE_PROMPT,
    SCOPE_PROMPT,
    SHORT_DESCRIPTION_PROMPT,
    TYPE_PROMPT,
)

COMMIT_TYPES: List[CommitType] = list(CommitType)


def clean_editor_text(text: Optional[str]) -> str:
    """Drop ``#`` comment lines and surrounding whitespace from editor output.

    Raises:
        NoInputError: If the editor was not saved or nothing is left.
    """
    if text is None:
        raise NoInputError("Editor was closed without saving a breaking change description")
    lines = [line for line in text.splitlines() if not line.lstrip().startswith("#")]
    cleaned = "\n".join(lines).strip()
    if not cleaned:
        raise NoInputError("Breaking change description is empty")
    return cleaned


class CommitComposer:
    """Walks the user through the commit prompts in a fixed order.

    The order is: type, scope, short description, long description,
    breaking change (with an editor session when confirmed) and linked
    issues. Nothing is ever revisited.
    """

    def __init__(self, prompter: Prompter, config: Optional[Config] = None):
        self.prompter = prompter
        self.config = config or Config()
        self.issue_builder = IssueBuilder(prompter)
        self.formatter = CommitMessageFormatter(self.config.issue_separator)
        self.scope_validator = ScopeValidator(self.config.require_scope)
        self.short_description_validator = ShortDescriptionValidator(self.config.max_short_length)

    def select_type(self) -> CommitType:
        labels = [commit_type.label for commit_type in COMMIT_TYPES]
        return COMMIT_TYPES[self.prompter.single_choice(TYPE_PROMPT, labels)]

    def capture_scope(self) -> str:
        required = self.config.require_scope
        scope = self.prompter.free_text(
            SCOPE_PROMPT if required else OPTIONAL_SCOPE_PROMPT,
            allow_empty=not required,
            validator=self.scope_validator,
        )
        return scope.strip()

    def capture_short_description(self) -> str:
        return self.prompter.free_text(
            SHORT_DESCRIPTION_PROMPT.format(max_length=self.config.max_short_length),
            validator=self.short_description_validator,
        )

    def capture_long_description(self) -> str:
        return self.prompter.free_text(LONG_DESCRIPTION_PROMPT, allow_empty=True).strip()

    def capture_breaking_change(self) -> Optional[str]:
        if not self.prompter.confirm(BREAKING_CHANGE_PROMPT, default=False):
            return None
        return clean_editor_text(self.prompter.external_editor(BREAKING_CHANGE_EDITOR_SEED))

    def capture_issue(self) -> Optional[Issue]:
        if not self.prompter.confirm(AFFECTS_ISSUE_PROMPT, default=False):
            return None
        return self.issue_builder.build()

    def compose(self) -> CommitDraft:
        """Run every prompt and collect the answers."""
        commit_type = self.select_type()
        scope = self.capture_scope()
        short_description = self.capture_short_description()
        long_description = self.capture_long_description()
        breaking_change = self.capture_breaking_change()
        issue = self.capture_issue()
        return CommitDraft(
            commit_type=commit_type,
            scope=scope,
            short_description=short_description,
            long_description=long_description,
            breaking_change=breaking_change,
            issue=issue,
        )

    def format_message(self, draft: CommitDraft) -> str:
        return self.formatter.format(draft)
