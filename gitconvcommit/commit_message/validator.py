"""Validators for free-text prompt answers."""
from typing import Tuple

from .validation import create_scope_chain, create_short_description_chain


class ShortDescriptionValidator:
    """Checks the short description against the configured length limit."""

    def __init__(self, max_length: int = 50):
        self.max_length = max_length
        self.validation_chain = create_short_description_chain(max_length)

    def __call__(self, value: str) -> Tuple[bool, str]:
        return self.validation_chain.handle(value)


class ScopeValidator:
    """Checks the scope, which may be required to be non-empty."""

    def __init__(self, required: bool = True):
        self.required = required
        self.validation_chain = create_scope_chain(required)

    def __call__(self, value: str) -> Tuple[bool, str]:
        return self.validation_chain.handle(value)
