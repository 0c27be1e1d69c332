"""Secret path construction.

Turns user supplied text into safe path segments, derives hostnames from
URLs and builds the canonical storage name of a new secret, asking the user
for a different name when the canonical one is already taken.
"""

import re
from urllib.parse import urlsplit

from icecream import ic

from secret_wizard import console
from secret_wizard.prompts import Prompter
from secret_wizard.store import Store

# Anything outside word characters, '@', '.' and '-' is replaced
_UNSAFE_CHARS = re.compile(r"[^\w@.-]")
_TRIM_CHARS = "_."

ROOT_STORE_LABEL = "<root>"


def sanitize(text: str) -> str:
    """Normalize arbitrary text into a single safe path segment.

    Unsafe characters (including both path separators) become underscores,
    and leading or trailing underscores and dots are removed. Applying the
    function twice gives the same result as applying it once.

    Args:
        text: Raw user input.

    Returns:
        The sanitized segment, empty if nothing usable is left.

    """
    return _UNSAFE_CHARS.sub("_", text).strip(_TRIM_CHARS)


def extract_hostname(url: str) -> str:
    """Extract a filepath-safe hostname from a URL-like string.

    A missing scheme is assumed to be http, only for parsing. When no
    hostname can be parsed the whole input is sanitized instead.

    Args:
        url: URL or bare host as typed by the user.

    Returns:
        The sanitized hostname, or an empty string for empty input.

    """
    if not url:
        return ""

    candidate = url if "://" in url else f"http://{url}"
    try:
        hostname = sanitize(urlsplit(candidate).hostname or "")
    except ValueError:
        hostname = ""

    if hostname:
        return hostname
    return sanitize(url)


def ask_for_store(prompter: Prompter, store: Store) -> str:
    """Let the user pick the store a secret goes to.

    Returns:
        The mount point name, or an empty string for the root store.

    """
    mounts = store.list_mount_points()
    if not mounts:
        return ""

    index = prompter.select("Please select the store you would like to use", [ROOT_STORE_LABEL, *mounts])
    if index == 0:
        return ""
    return mounts[index - 1]


def build_name(segments: list[str], prefix: str = "") -> str:
    """Join the store prefix and sanitized segments into a candidate name.

    Args:
        segments: Template segments in order, sanitized here.
        prefix: Store prefix, empty for the root store.

    Returns:
        The ``/``-delimited candidate name.

    """
    parts = [sanitize(segment) for segment in segments]
    name = "/".join(part for part in parts if part)
    if prefix:
        return f"{prefix.rstrip('/')}/{name}"
    return name


def resolve_collision(prompter: Prompter, store: Store, name: str) -> str:
    """Ask once for a different name if ``name`` is already taken.

    The replacement is not checked again; whatever the user enters is used.

    Returns:
        The original name if it is free, otherwise the user's replacement.

    """
    if not store.exists(name):
        return name

    console.warning(f"Secret {console.highlight(name)} already exists")
    return prompter.ask_string("Secret already exists, please choose another path", name)


def choose_name(prompter: Prompter, store: Store, segments: list[str]) -> str:
    """Select a store, build the canonical name and resolve collisions.

    Args:
        prompter: Prompt provider.
        store: Destination store.
        segments: Type-specific template segments, e.g. ``["websites", host, user]``.

    Returns:
        The name the secret will be written to.

    """
    prefix = ask_for_store(prompter, store)
    name = build_name(segments, prefix)
    ic(name)
    return resolve_collision(prompter, store, name)
