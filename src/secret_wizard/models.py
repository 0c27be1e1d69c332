"""Data models for secret-wizard.

This module provides the structured secret record, the closed set of wizard
types and the value objects passed between the wizards, the generators and
the naming engine.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

import yaml

from secret_wizard.exceptions import ValidationError


class WizardType(str, Enum):
    """Supported categories of secrets.

    Inherits from str to allow direct use in string contexts
    (e.g., summary output, debug traces).
    """

    WEBSITE = "website"
    PIN = "pin"
    GENERIC = "generic"
    AWS_IAM_KEY = "aws-iam-key"
    GCP_SERVICE_ACCOUNT = "gcp-service-account"

    @property
    def label(self) -> str:
        """Human readable menu label."""
        return _WIZARD_LABELS[self]


_WIZARD_LABELS = {
    WizardType.WEBSITE: "Website Login",
    WizardType.PIN: "PIN Code (numerical)",
    WizardType.GENERIC: "Generic",
    WizardType.AWS_IAM_KEY: "AWS Secret Key",
    WizardType.GCP_SERVICE_ACCOUNT: "GCP Service Account",
}


class GeneratorStrategy(str, Enum):
    """Available value generation strategies."""

    PASSPHRASE = "passphrase"
    RANDOM_CHARSET = "random-charset"
    NUMERIC_PIN = "numeric-pin"


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Defaults offered when generating a value.

    Attributes:
        word_count: Number of words in a passphrase.
        password_length: Length of a random charset password.
        symbols: Whether random charset passwords include symbols.
        pin_length: Number of digits in a PIN.

    """

    word_count: int = 4
    password_length: int = 24
    symbols: bool = False
    pin_length: int = 4


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """A strategy tag plus the parameters it needs.

    Attributes:
        strategy: Which generator to run.
        length: Word count for passphrases, character count otherwise.
        symbols: Only meaningful for RANDOM_CHARSET.

    """

    strategy: GeneratorStrategy
    length: int
    symbols: bool = False

    @classmethod
    def passphrase(cls, config: GeneratorConfig) -> "GenerationRequest":
        """Request a passphrase of ``config.word_count`` words."""
        return cls(GeneratorStrategy.PASSPHRASE, config.word_count)

    @classmethod
    def random_charset(cls, config: GeneratorConfig) -> "GenerationRequest":
        """Request a charset password using ``config.password_length`` and ``config.symbols``."""
        return cls(GeneratorStrategy.RANDOM_CHARSET, config.password_length, config.symbols)

    @classmethod
    def numeric_pin(cls, config: GeneratorConfig) -> "GenerationRequest":
        """Request a PIN of ``config.pin_length`` digits."""
        return cls(GeneratorStrategy.NUMERIC_PIN, config.pin_length)


class ServiceAccountInfo(NamedTuple):
    """Identity extracted from a service-account ``client_email``.

    Attributes:
        username: Part before the ``@``.
        project: First dot-delimited label after the ``@``.

    """

    username: str = ""
    project: str = ""


@dataclass(slots=True)
class Secret:
    """A structured credential record.

    Attributes:
        password: The primary (sensitive) value, may be empty.
        body: Opaque payload; when set it *is* the secret and the password may be empty.
        fields: Named fields in insertion order.

    """

    password: str = ""
    body: bytes | None = None
    fields: dict[str, str] = field(default_factory=dict)

    def set_field(self, key: str, value: str) -> None:
        """Set a named field, keeping first-insertion order.

        Raises:
            ValidationError: If the key is empty.

        """
        if not key:
            raise ValidationError("Field name must not be empty", operation="set field")
        self.fields[key] = value

    def to_bytes(self) -> bytes:
        """Serialize the secret for storage.

        A secret with a raw body serializes to exactly that body. Otherwise the
        password is written on the first line followed by the fields as YAML.
        """
        if self.body is not None:
            return self.body

        content = f"{self.password}\n"
        if self.fields:
            content += yaml.safe_dump(self.fields, sort_keys=False, allow_unicode=True)
        return content.encode()


def assemble_secret(password: str, fields: Iterable[tuple[str, str]] = ()) -> Secret:
    """Build a secret from a primary value and ordered field assignments.

    Args:
        password: The primary value.
        fields: ``(key, value)`` pairs applied in the order given.

    Returns:
        The assembled Secret.

    """
    secret = Secret(password=password)
    for key, value in fields:
        secret.set_field(key, value)
    return secret


def assemble_raw_secret(body: bytes) -> Secret:
    """Build a secret whose whole payload is an opaque body."""
    return Secret(password="", body=body)
