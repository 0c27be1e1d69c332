"""Service-account JSON parsing.

Extracts the account name and project from the ``client_email`` field of
a cloud service-account key file.
"""

import json

from secret_wizard.exceptions import ParseError
from secret_wizard.models import ServiceAccountInfo


def extract_service_account(data: bytes) -> ServiceAccountInfo:
    """Extract (username, project) from a service-account JSON document.

    The ``client_email`` field is expected to look like
    ``user@project.iam.gserviceaccount.com``.

    Args:
        data: Raw bytes of the JSON document.

    Returns:
        ServiceAccountInfo with username and project.

    Raises:
        ParseError: If the document is not a JSON object, ``client_email`` is
            missing or lacks an ``@`` or a ``.`` after it. When the ``@`` was
            found the error's ``info`` still carries the username.

    """
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise ParseError(f"Service account file is not valid JSON: {err}", operation="parse", cause=err) from err

    if not isinstance(document, dict):
        raise ParseError("Service account file does not contain a JSON object", operation="parse")

    email = document.get("client_email", "")
    if not isinstance(email, str):
        raise ParseError("client_email must be a string", operation="parse", target="client_email")

    parts = email.split("@")
    if len(parts) < 2:
        raise ParseError(
            "client_email contains no email", operation="parse", target="client_email", info=ServiceAccountInfo()
        )

    username = parts[0]
    domain = parts[1].split(".")
    if len(domain) < 2:
        raise ParseError(
            "client_email hostname contains not enough separators",
            operation="parse",
            target="client_email",
            info=ServiceAccountInfo(username=username),
        )

    return ServiceAccountInfo(username=username, project=domain[0])
