"""Shared test fixtures for secret-wizard tests."""

from collections.abc import Sequence
from typing import Any

import pytest

from secret_wizard.exceptions import AbortedError, StoreBackendError
from secret_wizard.models import GeneratorConfig, Secret
from secret_wizard.wizards import WizardContext

ABORT = object()


class ScriptedPrompter:
    """Prompter answering from a fixed script.

    Each call consumes the next answer. ``ABORT`` makes the call raise
    AbortedError, like a user pressing Ctrl-C.
    """

    def __init__(self, answers: Sequence[Any]) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, Any]] = []

    def _next(self, kind: str, prompt: str, default: Any = None) -> Any:
        self.calls.append((kind, prompt, default))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        answer = self.answers.pop(0)
        if answer is ABORT:
            raise AbortedError(operation="prompt", target=prompt)
        return answer

    def ask_string(self, prompt: str, default: str = "") -> str:
        return self._next("string", prompt, default)

    def ask_bool(self, prompt: str, default: bool) -> bool:
        return self._next("bool", prompt, default)

    def ask_int(self, prompt: str, default: int) -> int:
        return self._next("int", prompt, default)

    def ask_password(self, prompt: str) -> str:
        return self._next("password", prompt)

    def select(self, prompt: str, choices: Sequence[str]) -> int:
        return self._next("select", prompt, list(choices))

    def prompts(self, kind: str) -> list[str]:
        return [prompt for call_kind, prompt, _ in self.calls if call_kind == kind]


class MemoryStore:
    """In-memory store recording every write."""

    def __init__(self, existing: Sequence[str] = (), mounts: Sequence[str] = (), fail: bool = False) -> None:
        self.secrets: dict[str, Secret] = {name: Secret() for name in existing}
        self.mounts = list(mounts)
        self.fail = fail
        self.writes: list[tuple[str, Secret]] = []
        self.exists_calls: list[str] = []

    def exists(self, name: str) -> bool:
        self.exists_calls.append(name)
        return name in self.secrets

    def set(self, name: str, secret: Secret) -> None:
        if self.fail:
            raise StoreBackendError("disk full")
        self.writes.append((name, secret))
        self.secrets[name] = secret

    def list_mount_points(self) -> list[str]:
        return list(self.mounts)


class FakeClipboard:
    """Clipboard recording copied values."""

    def __init__(self) -> None:
        self.copies: list[tuple[str, bytes]] = []

    def copy(self, name: str, data: bytes) -> None:
        self.copies.append((name, data))


@pytest.fixture
def store():
    """Empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def clipboard():
    """Recording clipboard."""
    return FakeClipboard()


@pytest.fixture
def make_context(store, clipboard):
    """Build a WizardContext around a scripted prompter."""

    def _make(answers: Sequence[Any], *, print_password: bool = False, **overrides: Any) -> WizardContext:
        return WizardContext(
            prompter=overrides.pop("prompter", ScriptedPrompter(answers)),
            store=overrides.pop("store", store),
            clipboard=overrides.pop("clipboard", clipboard),
            print_password=print_password,
            config=overrides.pop("config", GeneratorConfig()),
        )

    return _make


@pytest.fixture
def service_account_json():
    """Sample service account key file content."""
    return b"""{
  "type": "service_account",
  "project_id": "project-123",
  "private_key_id": "abc123",
  "client_email": "svc@project-123.iam.gserviceaccount.com",
  "client_id": "1234567890"
}
"""
