"""Tests for the interactive commit composer."""
import pytest

from gitconvcommit.composer import CommitComposer, clean_editor_text
from gitconvcommit.config import Config
from gitconvcommit.exceptions import IssueConstructionError, NoInputError
from gitconvcommit.models import (
    CommitType,
    DifferentRepoIssue,
    IssueKeyword,
    MultiIssue,
    SameRepoIssue,
    SingleIssue,
)
from gitconvcommit.prompts import BREAKING_CHANGE_EDITOR_SEED


def test_compose_minimal(scripted_prompter):
    prompter = scripted_prompter(["feat", "api", "add endpoint", "", False, False])
    composer = CommitComposer(prompter)

    draft = composer.compose()

    assert draft.commit_type is CommitType.FEAT
    assert draft.scope == "api"
    assert draft.short_description == "add endpoint"
    assert draft.long_description == ""
    assert draft.breaking_change is None
    assert draft.issue is None
    assert composer.format_message(draft) == "feat(api): add endpoint\n\n\n\n\n"


def test_prompts_run_in_fixed_order(scripted_prompter):
    prompter = scripted_prompter(["fix", "core", "handle null", "", False, False])
    CommitComposer(prompter).compose()

    assert prompter.prompts == [
        "Select type of change you're committing",
        "What is the scope of the change",
        "Short desc (max 50 chars)",
        "Provide long description of the change (empty to skip)",
        "Are there any breaking changes?",
        "Does this change affect any issue?",
    ]


def test_commit_type_can_be_picked_by_number(scripted_prompter):
    prompter = scripted_prompter(["6", "db", "faster query", "", False, False])
    draft = CommitComposer(prompter).compose()
    assert draft.commit_type is CommitType.PERF


def test_short_description_too_long_is_asked_again(scripted_prompter):
    prompter = scripted_prompter(["feat", "api", "x" * 51, "x" * 50, "", False, False])
    draft = CommitComposer(prompter).compose()

    assert prompter.errors == ["This message is too long"]
    assert draft.short_description == "x" * 50


def test_short_description_limit_comes_from_config(scripted_prompter):
    prompter = scripted_prompter(["feat", "api", "too long", "short", "", False, False])
    draft = CommitComposer(prompter, Config(max_short_length=5)).compose()

    assert prompter.errors == ["This message is too long"]
    assert draft.short_description == "short"
    assert "Short desc (max 5 chars)" in prompter.prompts


def test_blank_scope_is_asked_again(scripted_prompter):
    prompter = scripted_prompter(["feat", "  ", "api", "add endpoint", "", False, False])
    draft = CommitComposer(prompter).compose()

    assert prompter.errors == ["Scope cannot be empty"]
    assert draft.scope == "api"


def test_optional_scope(scripted_prompter):
    prompter = scripted_prompter(["docs", "", "fix typo", "", False, False])
    composer = CommitComposer(prompter, Config(require_scope=False))
    draft = composer.compose()

    assert draft.scope == ""
    assert composer.format_message(draft) == "docs: fix typo\n\n\n\n\n"


def test_long_description(scripted_prompter):
    prompter = scripted_prompter(["feat", "api", "add endpoint", "  Adds /v2/users.  ", False, False])
    draft = CommitComposer(prompter).compose()
    assert draft.long_description == "Adds /v2/users."


def test_breaking_change_from_editor(scripted_prompter):
    prompter = scripted_prompter(
        ["feat", "api", "add endpoint", "", True, False],
        editor_text="removes v1 field\n# Breaking change description.\n",
    )
    composer = CommitComposer(prompter)
    message = composer.format_message(composer.compose())

    assert prompter.editor_seeds == [BREAKING_CHANGE_EDITOR_SEED]
    assert message == "feat(api): add endpoint\n\n\n\n\nBREAKING CHANGE: removes v1 field"


def test_breaking_change_without_saving(scripted_prompter):
    prompter = scripted_prompter(["feat", "api", "add endpoint", "", True], editor_text=None)
    with pytest.raises(NoInputError):
        CommitComposer(prompter).compose()


def test_breaking_change_with_only_comments(scripted_prompter):
    prompter = scripted_prompter(
        ["feat", "api", "add endpoint", "", True], editor_text=BREAKING_CHANGE_EDITOR_SEED
    )
    with pytest.raises(NoInputError, match="empty"):
        CommitComposer(prompter).compose()


def test_clean_editor_text_keeps_inner_lines():
    assert clean_editor_text("\nfirst\n# note\n  second\n\n") == "first\n  second"


def test_single_issue_in_same_repo(scripted_prompter):
    prompter = scripted_prompter([
        "fix", "core", "handle null", "", False,
        True, False, "fixes", "", "", 42,
    ])
    composer = CommitComposer(prompter)
    draft = composer.compose()

    assert draft.issue == SingleIssue(issue=SameRepoIssue(keyword=IssueKeyword.FIXES, number=42))
    assert composer.format_message(draft) == "fix(core): handle null\n\n\n\nfixes #42\n"


def test_single_issue_in_other_repo(scripted_prompter):
    prompter = scripted_prompter([
        "fix", "core", "handle null", "", False,
        True, False, "close", " acme ", "widgets", 7,
    ])
    draft = CommitComposer(prompter).compose()

    assert draft.issue == SingleIssue(
        issue=DifferentRepoIssue(keyword=IssueKeyword.CLOSE, number=7, owner="acme", repo="widgets")
    )
    assert str(draft.issue) == "close acme/widgets#7"


@pytest.mark.parametrize("owner,repo", [("acme", ""), ("", "widgets")])
def test_half_filled_issue_repository_is_an_error(scripted_prompter, owner, repo):
    prompter = scripted_prompter([
        "fix", "core", "handle null", "", False,
        True, False, "close", owner, repo, 7,
    ])
    with pytest.raises(IssueConstructionError):
        CommitComposer(prompter).compose()


def test_multiple_issues(scripted_prompter):
    prompter = scripted_prompter([
        "feat", "api", "add endpoint", "", False,
        True, True,
        "closes", "", "", 1, True,
        "Resolves", "acme", "widgets", 2, False,
    ])
    composer = CommitComposer(prompter)
    draft = composer.compose()

    assert isinstance(draft.issue, MultiIssue)
    assert len(draft.issue.issues) == 2
    assert composer.format_message(draft) == (
        "feat(api): add endpoint\n\n\n\ncloses #1, Resolves acme/widgets#2\n"
    )


def test_issue_separator_from_config(scripted_prompter):
    prompter = scripted_prompter([
        "feat", "api", "add endpoint", "", False,
        True, True,
        "fix", "", "", 1, True,
        "fix", "", "", 2, False,
    ])
    composer = CommitComposer(prompter, Config(issue_separator="\n"))
    message = composer.format_message(composer.compose())
    assert message.endswith("\n\nfix #1\nfix #2\n")
