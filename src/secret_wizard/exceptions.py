"""Custom exceptions for secret-wizard.

This module defines the exception hierarchy used throughout the application.
Every error carries an ``ErrorKind`` plus structured context so that the CLI
can map it to a process exit code at the outermost boundary.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of failure categories raised by the wizards."""

    ABORTED = "aborted"
    VALIDATION = "validation"
    PARSE = "parse"
    IO = "io"
    STORAGE = "storage"


class WizardError(Exception):
    """Base exception for all secret-wizard errors.

    Attributes:
        kind: The failure category.
        operation: What was being done when the failure happened.
        target: The field, file or secret name the failure relates to.
        cause: The underlying exception, if any.

    """

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        operation: str = "",
        target: str = "",
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.target = target
        self.cause = cause


class AbortedError(WizardError):
    """Raised when the user cancels a prompt or the selection menu."""

    kind = ErrorKind.ABORTED

    def __init__(self, message: str = "user aborted", **context: Any) -> None:
        super().__init__(message, **context)


class ValidationError(WizardError):
    """Raised when a required value is empty or out of range.

    This can occur when:
    - A required field (authority, account, short name, ...) is left empty
    - A URL yields no usable hostname
    - A length or word count is below 1
    """

    kind = ErrorKind.VALIDATION


class ParseError(WizardError):
    """Raised when the service-account JSON cannot be interpreted.

    Attributes:
        info: Whatever could be extracted before the failure, if anything.

    """

    kind = ErrorKind.PARSE

    def __init__(self, message: str, *, info: Any = None, **context: Any) -> None:
        super().__init__(message, **context)
        self.info = info


class WizardIOError(WizardError):
    """Raised when reading an input file or copying to the clipboard fails."""

    kind = ErrorKind.IO


class StorageError(WizardError):
    """Raised when the store rejects a write.

    The message always embeds the name the secret was meant to be stored at.
    """

    kind = ErrorKind.STORAGE


class StoreBackendError(Exception):
    """Raised by store backends when a read or write cannot be completed."""

    pass
