"""Password criteria shown as live feedback while typing."""

import re
from dataclasses import dataclass, asdict
from typing import List, Tuple

MIN_PASSWORD_LENGTH = 3
MAX_PASSWORD_LENGTH = 9
SPECIAL_CHARACTERS = '@$!%*?&'

_UPPERCASE = re.compile(r'[A-Z]')
_LOWERCASE = re.compile(r'[a-z]')
_NUMBER = re.compile(r'[0-9]')
_SPECIAL = re.compile('[' + re.escape(SPECIAL_CHARACTERS) + ']')

# Checklist order
CRITERIA_LABELS = (
    ('min_length', f'At least {MIN_PASSWORD_LENGTH} characters'),
    ('max_length', f'No more than {MAX_PASSWORD_LENGTH} characters'),
    ('has_uppercase', 'Contains uppercase letter'),
    ('has_lowercase', 'Contains lowercase letter'),
    ('has_number', 'Contains number'),
    ('has_special_char', 'Contains special character'),
)


@dataclass(frozen=True)
class PasswordCriteria:
    """Independent strength flags derived from a password."""

    min_length: bool = False
    max_length: bool = True
    has_uppercase: bool = False
    has_lowercase: bool = False
    has_number: bool = False
    has_special_char: bool = False

    def as_dict(self) -> dict:
        return asdict(self)

    def items(self) -> List[Tuple[str, bool]]:
        """Return (label, met) pairs in checklist order."""
        return [(label, getattr(self, flag)) for flag, label in CRITERIA_LABELS]


def evaluate_password(password: str) -> PasswordCriteria:
    """Compute the criteria flags for a password.

    Args:
        password: Current value of the password field.

    Returns:
        PasswordCriteria with one flag per rule.
    """
    return PasswordCriteria(
        min_length=len(password) >= MIN_PASSWORD_LENGTH,
        max_length=len(password) <= MAX_PASSWORD_LENGTH,
        has_uppercase=bool(_UPPERCASE.search(password)),
        has_lowercase=bool(_LOWERCASE.search(password)),
        has_number=bool(_NUMBER.search(password)),
        has_special_char=bool(_SPECIAL.search(password)),
    )
