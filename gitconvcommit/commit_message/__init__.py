"""Commit message formatting and input validation package."""

from .formatter import CommitMessageFormatter
from .validator import ScopeValidator, ShortDescriptionValidator

__all__ = [
    'CommitMessageFormatter',
    'ScopeValidator',
    'ShortDescriptionValidator',
]
