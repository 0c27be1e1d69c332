"""Secret creation wizards.

Each wizard walks the user through the fields of one kind of secret,
optionally generates the sensitive value, derives the storage name and
performs exactly one store write once every field has been collected.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path

from icecream import ic

from secret_wizard import console
from secret_wizard.clipboard import Clipboard
from secret_wizard.exceptions import (
    AbortedError,
    StorageError,
    StoreBackendError,
    ValidationError,
    WizardIOError,
)
from secret_wizard.generators import generate
from secret_wizard.models import (
    GenerationRequest,
    GeneratorConfig,
    Secret,
    ServiceAccountInfo,
    WizardType,
    assemble_raw_secret,
    assemble_secret,
)
from secret_wizard.naming import choose_name, extract_hostname
from secret_wizard.prompts import Prompter
from secret_wizard.service_account import extract_service_account
from secret_wizard.store import Store


@dataclass
class WizardContext:
    """Collaborators and settings shared by all wizards.

    Attributes:
        prompter: Prompt provider used for every question.
        store: Destination store.
        clipboard: Receives generated values unless print_password is set.
        print_password: Show generated values instead of copying them.
        config: Defaults offered when generating values.

    """

    prompter: Prompter
    store: Store
    clipboard: Clipboard
    print_password: bool = False
    config: GeneratorConfig = field(default_factory=GeneratorConfig)


def _ask_required(ctx: WizardContext, prompt: str, label: str) -> str:
    value = ctx.prompter.ask_string(prompt)
    if not value:
        raise ValidationError(f"{label} must not be empty", operation="prompt", target=label.lower())
    return value


def _ask_optional(ctx: WizardContext, prompt: str) -> str:
    # Optional answers fall back to empty instead of cancelling the wizard
    try:
        return ctx.prompter.ask_string(prompt)
    except AbortedError:
        return ""


def _generate_password(ctx: WizardContext) -> str:
    """Ask how the password should look and generate it."""
    prompter = ctx.prompter
    if prompter.ask_bool("Do you want a rememberable password?", True):
        words = prompter.ask_int("How many words should be combined into a passphrase?", ctx.config.word_count)
        request = GenerationRequest.passphrase(replace(ctx.config, word_count=words))
    else:
        length = prompter.ask_int("How long should the password be?", ctx.config.password_length)
        symbols = prompter.ask_bool("Do you want to include symbols?", ctx.config.symbols)
        request = GenerationRequest.random_charset(replace(ctx.config, password_length=length, symbols=symbols))
    return generate(request)


def _ask_password(ctx: WizardContext, label: str) -> tuple[str, bool]:
    """Generate or ask for a password.

    Returns:
        The password and whether it was generated.

    """
    if ctx.prompter.ask_bool("Do you want to generate a new password?", True):
        return _generate_password(ctx), True
    return ctx.prompter.ask_password(f"Please enter the password for {label}"), False


def _ask_pin(ctx: WizardContext) -> tuple[str, bool]:
    """Generate or ask for a PIN.

    Returns:
        The PIN and whether it was generated.

    """
    if ctx.prompter.ask_bool("Do you want to generate a new PIN?", True):
        length = ctx.prompter.ask_int("How long should the PIN be?", ctx.config.pin_length)
        return generate(GenerationRequest.numeric_pin(replace(ctx.config, pin_length=length))), True
    return ctx.prompter.ask_password("Please enter the PIN"), False


def _write(ctx: WizardContext, name: str, secret: Secret, wizard_type: WizardType) -> None:
    try:
        ctx.store.set(name, secret)
    except StoreBackendError as err:
        raise StorageError(f"failed to set '{name}': {err}", operation="write", target=name, cause=err) from err

    console.success(f"Created {console.highlight(name)}")
    console.summary_panel(
        "Secret created",
        {
            "Name": name,
            "Type": wizard_type.label,
            "Fields": ", ".join(secret.fields) or "-",
        },
    )


def print_or_copy(ctx: WizardContext, name: str, value: str, generated: bool) -> None:
    """Surface a generated value.

    Nothing happens for values the user typed in. Generated values are shown
    in plain text when ``print_password`` is set, otherwise they are copied to
    the clipboard.

    Raises:
        WizardIOError: If copying to the clipboard fails.

    """
    if not generated:
        return

    if ctx.print_password:
        console.reveal(name, value)
        return

    ctx.clipboard.copy(name, value.encode())


def create_website(ctx: WizardContext) -> str:
    """Walk through the website login wizard.

    Returns:
        The name the secret was stored under.

    """
    console.action("Creating Website login ...")
    url = ctx.prompter.ask_string("Please enter the URL")
    hostname = extract_hostname(url)
    if not hostname:
        raise ValidationError(f"Can not parse URL '{url}'", operation="parse url", target="url")

    username = ctx.prompter.ask_string("Please enter the Username/Login")
    password, generated = _ask_password(ctx, username or hostname)
    comment = _ask_optional(ctx, "Comments (optional)")

    name = choose_name(ctx.prompter, ctx.store, ["websites", hostname, username])
    secret = assemble_secret(password, [("url", url), ("username", username), ("comment", comment)])
    _write(ctx, name, secret, WizardType.WEBSITE)

    print_or_copy(ctx, name, password, generated)
    return name


def create_pin(ctx: WizardContext) -> str:
    """Walk through the numerical PIN wizard.

    Returns:
        The name the secret was stored under.

    """
    console.action("Creating numerical PIN ...")
    authority = _ask_required(ctx, "Please enter the authority (e.g. MyBank) this PIN is for", "Authority")
    application = _ask_required(ctx, "Please enter the entity (e.g. Credit Card) this PIN is for", "Application")
    pin, generated = _ask_pin(ctx)
    comment = _ask_optional(ctx, "Comments (optional)")

    name = choose_name(ctx.prompter, ctx.store, ["pins", authority, application])
    secret = assemble_secret(pin, [("application", application), ("comment", comment)])
    _write(ctx, name, secret, WizardType.PIN)

    print_or_copy(ctx, name, pin, generated)
    return name


def _ask_key_values(ctx: WizardContext) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    console.step("Enter zero or more key value pairs for this secret")
    while True:
        key = ctx.prompter.ask_string("Name for Key Value pair (enter to quit)")
        if not key:
            return pairs
        value = ctx.prompter.ask_string(f"Value for Key '{key}'")
        pairs.append((key, value))


def create_generic(ctx: WizardContext) -> str:
    """Walk through the generic secret wizard.

    Returns:
        The name the secret was stored under.

    """
    console.action("Creating generic secret ...")
    shortname = _ask_required(ctx, "Please enter a name for the secret", "Name")
    password, generated = _ask_password(ctx, shortname)
    pairs = _ask_key_values(ctx)
    ic([key for key, _ in pairs])

    name = choose_name(ctx.prompter, ctx.store, ["misc", shortname])
    secret = assemble_secret(password, pairs)
    _write(ctx, name, secret, WizardType.GENERIC)

    print_or_copy(ctx, name, password, generated)
    return name


def create_aws(ctx: WizardContext) -> str:
    """Walk through the AWS IAM key wizard.

    The secret access key is always typed in, so nothing is printed or
    copied afterwards.

    Returns:
        The name the secret was stored under.

    """
    console.action("Creating AWS credentials ...")
    account = _ask_required(ctx, "Please enter the AWS Account this key belongs to", "Account")
    username = _ask_required(ctx, "Please enter the name of the AWS IAM User this key belongs to", "Username")
    accesskey = ctx.prompter.ask_string("Please enter the Access Key ID (AWS_ACCESS_KEY_ID)")
    secretkey = ctx.prompter.ask_password("Please enter the Secret Access Key (AWS_SECRET_ACCESS_KEY)")
    region = _ask_optional(ctx, "Please enter the default Region (AWS_DEFAULT_REGION) (optional)")

    name = choose_name(ctx.prompter, ctx.store, ["aws", "iam", account, username])
    secret = assemble_secret(
        secretkey,
        [("account", account), ("username", username), ("accesskey", accesskey), ("region", region)],
    )
    _write(ctx, name, secret, WizardType.AWS_IAM_KEY)
    return name


def _read_service_account(path: str) -> tuple[bytes, ServiceAccountInfo]:
    try:
        data = Path(path).expanduser().read_bytes()
    except OSError as err:
        raise WizardIOError(
            f"Cannot read service account file '{path}': {err.strerror}", operation="read", target=path, cause=err
        ) from err

    return data, extract_service_account(data)


def create_gcp(ctx: WizardContext) -> str:
    """Walk through the GCP service account wizard.

    The JSON key file becomes the raw body of the secret.

    Returns:
        The name the secret was stored under.

    """
    console.action("Creating GCP credentials ...")
    path = ctx.prompter.ask_string("Please enter path to the Service Account JSON file")
    data, info = _read_service_account(path)
    ic(info)

    username = info.username or ctx.prompter.ask_string("Please enter the name of this service account")
    if not username:
        raise ValidationError("Username must not be empty", operation="prompt", target="username")

    project = info.project or ctx.prompter.ask_string("Please enter the name of this GCP project")
    if not project:
        raise ValidationError("Project must not be empty", operation="prompt", target="project")

    name = choose_name(ctx.prompter, ctx.store, ["gcp", "iam", project, username])
    _write(ctx, name, assemble_raw_secret(data), WizardType.GCP_SERVICE_ACCOUNT)
    return name


def select_wizard(prompter: Prompter) -> WizardType:
    """Present the wizard types as a menu.

    Raises:
        AbortedError: If the user leaves the menu.

    """
    types = list(WizardType)
    index = prompter.select(
        "Please select the type of secret you would like to create",
        [wizard_type.label for wizard_type in types],
    )
    return types[index]


def run_wizard(wizard_type: WizardType, ctx: WizardContext) -> str:
    """Run the wizard for ``wizard_type``.

    Returns:
        The name the secret was stored under.

    """
    ic(wizard_type)

    match wizard_type:
        case WizardType.WEBSITE:
            return create_website(ctx)
        case WizardType.PIN:
            return create_pin(ctx)
        case WizardType.GENERIC:
            return create_generic(ctx)
        case WizardType.AWS_IAM_KEY:
            return create_aws(ctx)
        case WizardType.GCP_SERVICE_ACCOUNT:
            return create_gcp(ctx)


def create_secret(ctx: WizardContext) -> str:
    """Let the user pick a secret type and run its wizard.

    Returns:
        The name the secret was stored under.

    """
    return run_wizard(select_wizard(ctx.prompter), ctx)
