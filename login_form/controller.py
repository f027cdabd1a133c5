"""Form controller owning the login form state and outcome modal."""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from login_form.credentials import verify_credentials
from login_form.criteria import PasswordCriteria, evaluate_password
from login_form.exceptions import CredentialMismatch, SchemaValidationError, UnknownFieldError
from login_form.forms import ValidationResult, require_valid_fields

logger = logging.getLogger(__name__)


class OutcomeModalState(Enum):
    """Which outcome dialog, if any, is open."""

    IDLE = 'idle'
    SHOW_SUCCESS = 'show_success'
    SHOW_FAILURE = 'show_failure'

    @classmethod
    def from_value(cls, value: Optional[str]) -> 'OutcomeModalState':
        """Parse a stored value, falling back to IDLE for anything unknown."""
        try:
            return cls(value)
        except ValueError:
            return cls.IDLE


class FormController:
    """State and transitions for a single login form instance."""

    FIELDS = ('username', 'password')

    def __init__(self, outcome: OutcomeModalState = OutcomeModalState.IDLE,
                 password_visible: bool = False):
        """Initialize an empty form.

        Args:
            outcome: Modal state to start from.
            password_visible: Whether the password input renders as plain text.
        """
        self.username = ''
        self.password = ''
        self.criteria = PasswordCriteria()
        self.criteria_visible = False
        self.errors = {}
        self.outcome = outcome
        self.password_visible = password_visible

    def update_field(self, name: str, value: str) -> None:
        """Store a field value and refresh derived password feedback.

        Args:
            name: Either 'username' or 'password'.
            value: New field contents.

        Raises:
            UnknownFieldError: If name is not a form field.
        """
        if name not in self.FIELDS:
            raise UnknownFieldError(name)

        setattr(self, name, value)

        if name == 'password':
            self.criteria = evaluate_password(value)
            self.criteria_visible = bool(value)

    def submit(self) -> ValidationResult:
        """Validate the form and, when valid, check the credentials.

        Returns:
            ValidationResult for the submitted fields.
        """
        self.outcome = OutcomeModalState.IDLE

        try:
            require_valid_fields(self.username, self.password)
        except SchemaValidationError as e:
            self.errors = e.errors
            logger.info("Rejected login form, invalid fields: %s", ', '.join(sorted(e.errors)))
            return ValidationResult(e.errors)

        self.errors = {}

        try:
            verify_credentials(self.username, self.password)
            self.outcome = OutcomeModalState.SHOW_SUCCESS
        except CredentialMismatch:
            self.outcome = OutcomeModalState.SHOW_FAILURE

        logger.info("Login attempt for %r: %s", self.username, self.outcome.value)
        return ValidationResult()

    def dismiss_modal(self) -> None:
        """Close whichever outcome dialog is open."""
        logger.debug("Dismissed %s modal", self.outcome.value)
        self.outcome = OutcomeModalState.IDLE

    def toggle_password_visibility(self) -> None:
        """Switch the password input between masked and plain text."""
        self.password_visible = not self.password_visible

    def criteria_items(self) -> List[Tuple[str, bool]]:
        """Checklist rows as (label, met) pairs."""
        return self.criteria.items()
