"""UI components for UBIX.

This package contains:
- prompts: Questionary-based user input prompts and the Prompter capability
"""

from ubix.ui.prompts import (
    DefaultsPrompter,
    Prompter,
    PromptField,
    QuestionaryPrompter,
    custom_style,
    prompt_confirm,
    prompt_input,
)

__all__ = [
    "custom_style",
    "prompt_confirm",
    "prompt_input",
    "PromptField",
    "Prompter",
    "QuestionaryPrompter",
    "DefaultsPrompter",
]
