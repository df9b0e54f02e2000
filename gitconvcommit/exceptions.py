"""Errors raised by git-conv-commit."""


class GitConvCommitError(Exception):
    """Base class for all fatal git-conv-commit errors."""


class RepositoryError(GitConvCommitError):
    """A git operation failed or no repository could be found."""


class IssueConstructionError(GitConvCommitError, ValueError):
    """Issue owner and repository were supplied inconsistently."""


class NoInputError(GitConvCommitError):
    """The external editor was closed without any content."""
