"""Interactive prompt primitives.

``Prompter`` is the interface the composer talks to. ``ClickPrompter``
implements it on top of click prompts, with the choice lists rendered by
rich. Interrupting any prompt raises ``click.Abort``.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple

import click
from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.markup import escape

from .config import Config
from .prompts import VALUE_REQUIRED_MESSAGE

Validator = Callable[[str], Tuple[bool, str]]


class PromptTheme(BaseModel):
    """Styling shared by every prompt of a run."""

    model_config = ConfigDict(frozen=True)

    prompt_color: str = "white"
    active_color: str = "yellow"
    hint_color: str = "bright_black"

    @classmethod
    def from_config(cls, config: Config) -> "PromptTheme":
        return cls(
            prompt_color=config.prompt_color,
            active_color=config.active_color,
            hint_color=config.hint_color,
        )


def _is_subsequence(needle: str, haystack: str) -> bool:
    remaining = iter(haystack)
    return all(char in remaining for char in needle)


def match_choice(query: str, labels: Sequence[str]) -> int:
    """Resolve what the user typed in a choice prompt to an index into ``labels``.

    A 1-based number picks directly. Text is compared case-insensitively:
    an exact label (or the part before ``:``) wins, then a unique prefix,
    then a unique fuzzy subsequence match.

    Raises:
        click.BadParameter: If nothing or more than one label matches.
    """
    text = query.strip()
    if not text:
        raise click.BadParameter("Choose one of the listed options")

    if text.isdigit():
        position = int(text)
        if 1 <= position <= len(labels):
            return position - 1
        raise click.BadParameter(f"Choose a number between 1 and {len(labels)}")

    needle = text.lower()
    lowered = [label.lower() for label in labels]

    for index, label in enumerate(lowered):
        if needle == label or needle == label.split(":", 1)[0].strip():
            return index

    for matches in (
        [i for i, label in enumerate(lowered) if label.startswith(needle)],
        [i for i, label in enumerate(lowered) if _is_subsequence(needle, label)],
    ):
        if len(matches) == 1:
            return matches[0]
        if matches:
            candidates = ", ".join(labels[i].split(":", 1)[0] for i in matches)
            raise click.BadParameter(f"'{text}' is ambiguous: {candidates}")

    raise click.BadParameter(f"No option matches '{text}'")


class Prompter(ABC):
    """Abstract interface for the interactive prompts."""

    @abstractmethod
    def single_choice(self, prompt: str, labels: Sequence[str]) -> int:
        """Ask the user to pick one of ``labels``; return its index."""
        pass

    @abstractmethod
    def free_text(
        self, prompt: str, allow_empty: bool = False, validator: Optional[Validator] = None
    ) -> str:
        """Ask for a line of text, re-prompting until ``validator`` accepts it."""
        pass

    @abstractmethod
    def integer(self, prompt: str, minimum: int = 0) -> int:
        """Ask for a whole number not below ``minimum``."""
        pass

    @abstractmethod
    def confirm(self, prompt: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        pass

    @abstractmethod
    def external_editor(self, seed: str) -> Optional[str]:
        """Open the user's editor on ``seed``; None if nothing was saved."""
        pass


class ClickPrompter(Prompter):
    """Prompter backed by click's terminal prompts."""

    def __init__(
        self,
        theme: Optional[PromptTheme] = None,
        console: Optional[Console] = None,
        editor: Optional[str] = None,
    ):
        self.theme = theme or PromptTheme()
        self.console = console or Console()
        self.editor = editor

    def _style(self, prompt: str) -> str:
        return click.style(prompt, fg=self.theme.prompt_color)

    def single_choice(self, prompt: str, labels: Sequence[str]) -> int:
        choices: List[str] = list(labels)
        for position, label in enumerate(choices, start=1):
            self.console.print(
                f"  [{self.theme.active_color}]{position:>2}[/] {escape(label)}"
            )
        self.console.print(
            f"[{self.theme.hint_color}]Type a number or part of a name[/]"
        )
        return click.prompt(
            self._style(prompt),
            value_proc=lambda value: match_choice(value, choices),
        )

    def free_text(
        self, prompt: str, allow_empty: bool = False, validator: Optional[Validator] = None
    ) -> str:
        # click treats the empty default as an answer, so blank input reaches check()
        def check(value: str) -> str:
            if validator is not None:
                is_valid, message = validator(value)
                if not is_valid:
                    raise click.BadParameter(message)
            if not value and not allow_empty:
                raise click.BadParameter(VALUE_REQUIRED_MESSAGE)
            return value

        return click.prompt(
            self._style(prompt),
            default="",
            show_default=False,
            value_proc=check,
        )

    def integer(self, prompt: str, minimum: int = 0) -> int:
        return click.prompt(self._style(prompt), type=click.IntRange(min=minimum))

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return click.confirm(self._style(prompt), default=default)

    def external_editor(self, seed: str) -> Optional[str]:
        return click.edit(text=seed, editor=self.editor, require_save=True)
