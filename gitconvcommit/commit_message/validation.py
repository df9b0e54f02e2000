"""Prompt input validation using Chain of Responsibility pattern."""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

TOO_LONG_MESSAGE = "This message is too long"
EMPTY_SCOPE_MESSAGE = "Scope cannot be empty"


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(self, value: str) -> Tuple[bool, str]:
        """Handle validation and pass to next handler if valid."""
        result = self.validate(value)
        if not result[0] or not self.next_handler:
            return result
        return self.next_handler.handle(value)

    @abstractmethod
    def validate(self, value: str) -> Tuple[bool, str]:
        """Validate a single prompt answer."""
        pass


class NotEmptyHandler(ValidationHandler):
    """Rejects empty or whitespace-only answers."""

    def __init__(self, message: str, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.message = message

    def validate(self, value: str) -> Tuple[bool, str]:
        if not value.strip():
            return False, self.message
        return True, ""


class MaxLengthHandler(ValidationHandler):
    """Rejects answers longer than ``max_length`` characters."""

    def __init__(self, max_length: int = 50, message: str = TOO_LONG_MESSAGE,
                 next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.max_length = max_length
        self.message = message

    def validate(self, value: str) -> Tuple[bool, str]:
        if len(value) > self.max_length:
            return False, self.message
        return True, ""


class AcceptHandler(ValidationHandler):
    """Terminal handler that accepts everything."""

    def validate(self, value: str) -> Tuple[bool, str]:
        return True, ""


def create_short_description_chain(max_length: int = 50) -> ValidationHandler:
    """Create the validation chain for the short description."""
    return MaxLengthHandler(max_length)


def create_scope_chain(required: bool = True) -> ValidationHandler:
    """Create the validation chain for the scope."""
    if required:
        return NotEmptyHandler(EMPTY_SCOPE_MESSAGE)
    return AcceptHandler()
