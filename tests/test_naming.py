"""Tests for naming.py module."""

import pytest

from conftest import ABORT, MemoryStore, ScriptedPrompter
from secret_wizard.exceptions import AbortedError
from secret_wizard.naming import (
    ROOT_STORE_LABEL,
    ask_for_store,
    build_name,
    choose_name,
    extract_hostname,
    resolve_collision,
    sanitize,
)


class TestSanitize:
    """Tests for path segment sanitizing."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "plain",
            "a/b\\c",
            "../../etc/passwd",
            "  spaced out  ",
            "My Bank: Credit Card?",
            "__..weird..__",
            "ünïcödé/ñame",
            "user@example.com",
            "tab\tand\nnewline",
        ],
    )
    def test_idempotent_and_separator_free(self, raw):
        """Test sanitizing twice equals sanitizing once and drops separators."""
        once = sanitize(raw)
        assert sanitize(once) == once
        assert "/" not in once
        assert "\\" not in once

    def test_empty_input(self):
        """Test empty input yields empty output."""
        assert sanitize("") == ""

    def test_keeps_safe_characters(self):
        """Test word characters, '@', '.' and '-' survive."""
        assert sanitize("john.doe-1@example.com") == "john.doe-1@example.com"

    def test_replaces_unsafe_characters(self):
        """Test unsafe characters become underscores."""
        assert sanitize("My Bank") == "My_Bank"
        assert sanitize("a/b") == "a_b"

    def test_trims_edges(self):
        """Test leading and trailing dots and underscores are removed."""
        assert sanitize("..") == ""
        assert sanitize(" name ") == "name"


class TestExtractHostname:
    """Tests for hostname extraction."""

    def test_empty(self):
        """Test empty input returns empty."""
        assert extract_hostname("") == ""

    def test_full_url(self):
        """Test hostname of a URL with scheme, lowercased."""
        assert extract_hostname("https://Example.com/login") == "example.com"

    def test_scheme_less_input(self):
        """Test input without a scheme is still parsed."""
        assert extract_hostname("example.com/path") == "example.com"

    def test_port_and_credentials_dropped(self):
        """Test port and userinfo are not part of the hostname."""
        assert extract_hostname("ftp://user:pw@files.example.org:2121/x") == "files.example.org"

    def test_unparsable_falls_back_to_raw(self):
        """Test garbage input falls back to the sanitized raw text."""
        result = extract_hostname("!!!not a url!!!")
        assert result
        assert result == "not_a_url"

    def test_invalid_url_falls_back(self):
        """Test URLs the parser rejects fall back to the raw text."""
        result = extract_hostname("http://[broken")
        assert result == "http____broken"

    def test_assumed_scheme_not_exposed(self):
        """Test the assumed scheme never leaks into the result."""
        assert "http" not in extract_hostname("example.com")


class TestBuildName:
    """Tests for candidate name construction."""

    def test_without_prefix(self):
        """Test segments are joined with slashes."""
        assert build_name(["websites", "example.com", "bob"]) == "websites/example.com/bob"

    def test_with_prefix(self):
        """Test the store prefix comes first."""
        assert build_name(["misc", "test"], "work") == "work/misc/test"
        assert build_name(["misc", "test"], "work/") == "work/misc/test"

    def test_segments_are_sanitized(self):
        """Test separators inside segments do not create new levels."""
        assert build_name(["pins", "My Bank", "credit/card"]) == "pins/My_Bank/credit_card"

    def test_empty_segments_skipped(self):
        """Test segments that sanitize to nothing are left out."""
        assert build_name(["websites", "example.com", ""]) == "websites/example.com"


class TestAskForStore:
    """Tests for store selection."""

    def test_no_mount_points(self):
        """Test the root store is used without asking when there are no mounts."""
        prompter = ScriptedPrompter([])
        assert ask_for_store(prompter, MemoryStore()) == ""
        assert prompter.calls == []

    def test_select_root(self):
        """Test selecting the root entry yields an empty prefix."""
        prompter = ScriptedPrompter([0])
        assert ask_for_store(prompter, MemoryStore(mounts=["work"])) == ""
        assert prompter.calls[0][2] == [ROOT_STORE_LABEL, "work"]

    def test_select_mount(self):
        """Test selecting a mount point returns its name."""
        prompter = ScriptedPrompter([2])
        assert ask_for_store(prompter, MemoryStore(mounts=["personal", "work"])) == "work"

    def test_abort(self):
        """Test aborting the store menu propagates."""
        with pytest.raises(AbortedError):
            ask_for_store(ScriptedPrompter([ABORT]), MemoryStore(mounts=["work"]))


class TestResolveCollision:
    """Tests for collision handling."""

    def test_free_name_kept(self):
        """Test an unused name is returned without prompting."""
        prompter = ScriptedPrompter([])
        assert resolve_collision(prompter, MemoryStore(), "misc/test") == "misc/test"

    def test_collision_prompts_with_default(self):
        """Test a taken name prompts once, defaulting to the candidate."""
        prompter = ScriptedPrompter(["misc/test2"])
        store = MemoryStore(existing=["misc/test"])

        assert resolve_collision(prompter, store, "misc/test") == "misc/test2"
        assert prompter.calls == [("string", "Secret already exists, please choose another path", "misc/test")]

    def test_replacement_not_rechecked(self):
        """Documented behavior: the replacement is used even if it is taken too.

        Only one existence check happens. This mirrors the single-shot rename
        and is pinned here so a change to it is a deliberate decision.
        """
        prompter = ScriptedPrompter(["misc/other"])
        store = MemoryStore(existing=["misc/test", "misc/other"])

        assert resolve_collision(prompter, store, "misc/test") == "misc/other"
        assert store.exists_calls == ["misc/test"]

    def test_abort_on_rename(self):
        """Test aborting the rename prompt propagates."""
        with pytest.raises(AbortedError):
            resolve_collision(ScriptedPrompter([ABORT]), MemoryStore(existing=["x"]), "x")


class TestChooseName:
    """Tests for the combined naming flow."""

    def test_prefix_and_collision(self):
        """Test the chosen mount prefixes the name before the existence check."""
        prompter = ScriptedPrompter([1])
        store = MemoryStore(mounts=["work"])

        assert choose_name(prompter, store, ["misc", "vpn"]) == "work/misc/vpn"
        assert store.exists_calls == ["work/misc/vpn"]
