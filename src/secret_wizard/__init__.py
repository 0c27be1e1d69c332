"""secret-wizard: Interactive creation of structured secrets.

This package guides a user through creating website logins, PINs, generic
secrets and cloud credentials, derives a storage name for each and hands
the result to a store.

Example usage:
    from secret_wizard import DirectoryStore, WizardContext, WizardType, run_wizard
    from secret_wizard.clipboard import SystemClipboard
    from secret_wizard.prompts import QuestionaryPrompter

    ctx = WizardContext(
        prompter=QuestionaryPrompter(),
        store=DirectoryStore("~/.secrets"),
        clipboard=SystemClipboard(),
    )
    run_wizard(WizardType.WEBSITE, ctx)
"""

__version__ = "0.1.0"

from secret_wizard.exceptions import (
    AbortedError,
    ErrorKind,
    ParseError,
    StorageError,
    StoreBackendError,
    ValidationError,
    WizardError,
    WizardIOError,
)
from secret_wizard.models import GenerationRequest, GeneratorConfig, Secret, ServiceAccountInfo, WizardType
from secret_wizard.store import DirectoryStore
from secret_wizard.wizards import WizardContext, create_secret, run_wizard

__all__ = [
    # Version
    "__version__",
    # Wizards
    "WizardContext",
    "create_secret",
    "run_wizard",
    # Models
    "GenerationRequest",
    "GeneratorConfig",
    "Secret",
    "ServiceAccountInfo",
    "WizardType",
    # Stores
    "DirectoryStore",
    # Exceptions
    "WizardError",
    "ErrorKind",
    "AbortedError",
    "ValidationError",
    "ParseError",
    "WizardIOError",
    "StorageError",
    "StoreBackendError",
]
