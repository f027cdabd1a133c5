"""Hardcoded credential check for the demo login."""

from login_form.exceptions import CredentialMismatch

VALID_USERNAME = 'koushik123'
VALID_PASSWORD = 'Koushik@123'


def verify_credentials(username: str, password: str) -> None:
    """Compare credentials against the demo account.

    Args:
        username: Submitted username.
        password: Submitted password.

    Raises:
        CredentialMismatch: If either value differs from the demo account.
    """
    if username != VALID_USERNAME or password != VALID_PASSWORD:
        raise CredentialMismatch(username)
