"""Interactive user prompts.

This module defines the prompt-provider abstraction the wizards talk to and
its questionary-backed implementation. Any prompt the user cancels raises
AbortedError so that a wizard unwinds before anything is written.
"""

from collections.abc import Sequence
from typing import Any, Protocol

import questionary

from secret_wizard import console
from secret_wizard.exceptions import AbortedError, ValidationError
from secret_wizard.styles import POINTER, PROMPT_STYLE, QMARK

_PASSWORD_ATTEMPTS = 3


class Prompter(Protocol):
    """Request/response prompt provider used by the wizards."""

    def ask_string(self, prompt: str, default: str = "") -> str: ...

    def ask_bool(self, prompt: str, default: bool) -> bool: ...

    def ask_int(self, prompt: str, default: int) -> int: ...

    def ask_password(self, prompt: str) -> str: ...

    def select(self, prompt: str, choices: Sequence[str]) -> int: ...


def validate_positive_int(value: str) -> bool | str:
    """Validate that the input is a positive integer.

    Args:
        value: The raw text typed by the user.

    Returns:
        True if valid, or an error message string if invalid.

    """
    try:
        number = int(value)
    except ValueError:
        return "Please enter a whole number"
    if number < 1:
        return "Please enter a number greater than zero"
    return True


def _answered(answer: Any, prompt: str) -> Any:
    if answer is None:
        raise AbortedError(operation="prompt", target=prompt)
    return answer


class QuestionaryPrompter:
    """Prompter that renders questions in the terminal with questionary."""

    def ask_string(self, prompt: str, default: str = "") -> str:
        answer = questionary.text(prompt, default=default, style=PROMPT_STYLE, qmark=QMARK).ask()
        return _answered(answer, prompt)

    def ask_bool(self, prompt: str, default: bool) -> bool:
        answer = questionary.confirm(prompt, default=default, style=PROMPT_STYLE, qmark=QMARK).ask()
        return _answered(answer, prompt)

    def ask_int(self, prompt: str, default: int) -> int:
        answer = questionary.text(
            prompt,
            default=str(default),
            validate=validate_positive_int,
            style=PROMPT_STYLE,
            qmark=QMARK,
        ).ask()
        return int(_answered(answer, prompt))

    def ask_password(self, prompt: str) -> str:
        for _ in range(_PASSWORD_ATTEMPTS):
            password = _answered(questionary.password(prompt, style=PROMPT_STYLE, qmark=QMARK).ask(), prompt)
            repeated = _answered(
                questionary.password("Retype to confirm", style=PROMPT_STYLE, qmark=QMARK).ask(), prompt
            )
            if password == repeated:
                return password
            console.warning("Entries do not match, please try again")
        raise ValidationError("Entered values did not match", operation="prompt", target=prompt)

    def select(self, prompt: str, choices: Sequence[str]) -> int:
        answer = questionary.select(
            prompt,
            choices=[{"name": name, "value": index} for index, name in enumerate(choices)],
            instruction="(Use arrow keys, Ctrl-C to quit)",
            style=PROMPT_STYLE,
            pointer=POINTER,
            qmark=QMARK,
        ).ask()
        return _answered(answer, prompt)
