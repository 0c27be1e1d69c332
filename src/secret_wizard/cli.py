#!/usr/bin/env python
"""Command-line interface for secret-wizard.

This module provides the CLI entry point, wires the questionary prompter,
the directory store and the system clipboard into the wizards and maps
wizard errors to process exit codes.
"""

import os
import sys

import click
from icecream import ic

from secret_wizard import __version__, console
from secret_wizard.clipboard import SystemClipboard
from secret_wizard.exceptions import ErrorKind, WizardError
from secret_wizard.prompts import QuestionaryPrompter
from secret_wizard.store import DirectoryStore
from secret_wizard.wizards import WizardContext, create_secret

EXIT_CODES = {
    ErrorKind.ABORTED: 130,
    ErrorKind.VALIDATION: 1,
    ErrorKind.PARSE: 1,
    ErrorKind.IO: 3,
    ErrorKind.STORAGE: 4,
}


def default_store_dir() -> str:
    """Return the XDG-compliant default location of the store."""
    data_home = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
    return os.path.join(data_home, "secret-wizard", "store")


@click.command(help="Interactively create a new secret")
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
@click.option(
    "--print",
    "-p",
    "print_password",
    required=False,
    is_flag=True,
    help="print the generated password instead of copying it to the clipboard",
)
@click.option(
    "--store-dir",
    required=False,
    envvar="SECRET_WIZARD_STORE",
    default=default_store_dir,
    show_default="$XDG_DATA_HOME/secret-wizard/store",
    help="directory holding the secrets",
)
@click.option("--mount", "-m", "mounts", required=False, multiple=True, help="mount point to offer (repeatable)")
def cli(
    debug: bool,
    print_password: bool,
    store_dir: str,
    mounts: tuple[str, ...],
    version: bool,
) -> None:
    """Process CLI arguments and run the creation wizard.

    Args:
        debug: Enable debug output.
        print_password: Print generated values instead of copying them.
        store_dir: Root directory of the store.
        mounts: Mount points offered when choosing the store.
        version: Print version and exit.

    """
    if not debug:
        ic.disable()

    if version:
        click.echo(__version__)
        return

    ctx = WizardContext(
        prompter=QuestionaryPrompter(),
        store=DirectoryStore(store_dir, mounts),
        clipboard=SystemClipboard(),
        print_password=print_password,
    )

    try:
        create_secret(ctx)
    except WizardError as e:
        console.error(str(e))
        sys.exit(EXIT_CODES[e.kind])


if __name__ == "__main__":
    cli()
