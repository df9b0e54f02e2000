"""Prompt texts and fixed messages for the git-conv-commit tool."""

TYPE_PROMPT = "Select type of change you're committing"
SCOPE_PROMPT = "What is the scope of the change"
OPTIONAL_SCOPE_PROMPT = "What is the scope of the change (empty to skip)"
SHORT_DESCRIPTION_PROMPT = "Short desc (max {max_length} chars)"
LONG_DESCRIPTION_PROMPT = "Provide long description of the change (empty to skip)"
BREAKING_CHANGE_PROMPT = "Are there any breaking changes?"
AFFECTS_ISSUE_PROMPT = "Does this change affect any issue?"

MULTI_ISSUE_PROMPT = "Does this resolve multiple issues?"
ANOTHER_ISSUE_PROMPT = "Link another issue?"
KEYWORD_PROMPT = "Choose adequate keyword"
OWNER_PROMPT = "What's the owner of the repo (leave empty for current repo)"
REPO_PROMPT = "What's the repo name (leave empty for current repo)"
ISSUE_NUMBER_PROMPT = "Enter issue number"

# Lines starting with '#' are removed from the editor result.
BREAKING_CHANGE_EDITOR_SEED = '''
# Breaking change description.
# Describe what breaks and how to migrate. Lines starting with '#' are ignored,
# and an empty description aborts the commit.
'''

NOTHING_STAGED_MESSAGE = "Empty worktree: nothing staged to commit"
VALUE_REQUIRED_MESSAGE = "A value is required"
