"""Secret stores.

The wizards only need three things from a store: an existence check, a
single write and the list of mount points. ``DirectoryStore`` is the
plain directory backend used by the command line tool; it does not
encrypt anything.
"""

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from icecream import ic

from secret_wizard.exceptions import StoreBackendError
from secret_wizard.models import Secret

SECRET_SUFFIX = ".secret"
_INVALID_LEAVES = ("", ".", "..")


class Store(Protocol):
    """Destination of newly created secrets."""

    def exists(self, name: str) -> bool: ...

    def set(self, name: str, secret: Secret) -> None: ...

    def list_mount_points(self) -> list[str]: ...


class DirectoryStore:
    """Store that keeps one file per secret below a root directory.

    Attributes:
        root: Directory holding the root store.
        mounts: Names of the mount points, each a subdirectory of root.

    """

    def __init__(self, root: str | Path, mounts: Sequence[str] = ()) -> None:
        self.root = Path(root).expanduser()
        self.mounts = sorted({mount.strip("/") for mount in mounts if mount.strip("/")})

    def _path(self, name: str) -> Path:
        relative = name.strip("/")
        if relative.rsplit("/", 1)[-1] in _INVALID_LEAVES:
            raise StoreBackendError(f"Name '{name}' does not name a secret")
        path = (self.root / f"{relative}{SECRET_SUFFIX}").resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise StoreBackendError(f"Name '{name}' points outside of the store")
        return path

    def exists(self, name: str) -> bool:
        try:
            return self._path(name).is_file()
        except StoreBackendError:
            return False

    def set(self, name: str, secret: Secret) -> None:
        """Write a secret, replacing an existing one with the same name.

        Raises:
            StoreBackendError: If the name is invalid or the file cannot be written.

        """
        path = self._path(name)
        ic(str(path))
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "wb") as stream:
                stream.write(secret.to_bytes())
        except OSError as err:
            raise StoreBackendError(f"Cannot write '{path}': {err.strerror}") from err

    def list_mount_points(self) -> list[str]:
        return list(self.mounts)
