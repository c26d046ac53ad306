"""Interactive prompts for UBIX.

This module provides Questionary-based user input prompts with
consistent styling and error handling, and the ``Prompter`` capability
used by commands that collect values from the user.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

import questionary
from questionary import Style

from ubix.utils.errors import UserCancelledError
from ubix.utils.logging import log_message

# Custom style matching the application theme
custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)

Validator = Callable[[str], bool | str]


def prompt_confirm(
    message: str,
    default: bool = True,
    *,
    auto_enter: bool = False,
) -> bool:
    """Prompt for yes/no confirmation.

    Args:
        message: Question to ask
        default: Default value if user presses Enter
        auto_enter: If True, automatically accept default

    Returns:
        True for yes, False for no

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt confirm: {message}")

    if auto_enter:
        log_message(f"Auto-enter: returning default {default}")
        return default

    try:
        result = questionary.confirm(
            message,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled confirmation prompt")

        log_message(f"User response: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_input(
    message: str,
    default: str = "",
    *,
    validate: Validator | None = None,
) -> str:
    """Prompt for text input.

    Args:
        message: Prompt message
        default: Default value
        validate: Optional validation function

    Returns:
        User input string

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt input: {message}")

    try:
        result = questionary.text(
            message,
            default=default,
            validate=validate,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled input prompt")

        log_message(f"User input: {result[:50]}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


@dataclass(frozen=True)
class PromptField:
    """A value to ask the user for.

    Attributes:
        name: Key of the value (e.g., "version")
        description: Text shown to the user
        validate: Validator for the answer
    """

    name: str
    description: str
    validate: Validator | None = field(default=None, compare=False)


class Prompter(Protocol):
    """Capability to ask the user for values."""

    def ask(self, prompt_field: PromptField, default: str) -> str:
        """Return the answer for ``prompt_field``, offering ``default``."""
        ...

    def confirm(self, message: str, default: bool = True) -> bool:
        """Return the user's yes/no answer to ``message``."""
        ...


class QuestionaryPrompter:
    """Asks on the terminal with questionary."""

    def ask(self, prompt_field: PromptField, default: str) -> str:
        return prompt_input(
            prompt_field.description,
            default=default,
            validate=prompt_field.validate,
        )

    def confirm(self, message: str, default: bool = True) -> bool:
        return prompt_confirm(message, default=default)


class DefaultsPrompter:
    """Answers every question with its default, never touching the terminal."""

    def ask(self, prompt_field: PromptField, default: str) -> str:
        log_message(f"Non-interactive: {prompt_field.name} = {default!r}")
        return default

    def confirm(self, message: str, default: bool = True) -> bool:
        return prompt_confirm(message, default=default, auto_enter=True)


__all__ = [
    "custom_style",
    "prompt_confirm",
    "prompt_input",
    "PromptField",
    "Prompter",
    "QuestionaryPrompter",
    "DefaultsPrompter",
    "Validator",
]
