"""Clipboard integration backed by pyperclip."""

from typing import Protocol

import pyperclip

from secret_wizard import console
from secret_wizard.exceptions import WizardIOError


class Clipboard(Protocol):
    """Anything that can receive a copied secret value."""

    def copy(self, name: str, data: bytes) -> None: ...


class SystemClipboard:
    """Copies values to the system clipboard."""

    def copy(self, name: str, data: bytes) -> None:
        """Copy ``data`` to the clipboard.

        Args:
            name: Name of the secret, only used for messages.
            data: The value to copy.

        Raises:
            WizardIOError: If no clipboard mechanism is available.

        """
        try:
            pyperclip.copy(data.decode())
        except pyperclip.PyperclipException as err:
            raise WizardIOError(
                f"failed to copy to clipboard: {err}", operation="copy to clipboard", target=name, cause=err
            ) from err
        console.success(f"Copied {console.highlight(name)} to clipboard")
