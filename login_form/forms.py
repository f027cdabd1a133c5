"""WTForms form definition and schema validation for the login form."""

from werkzeug.datastructures import MultiDict
from wtforms import Form, StringField, PasswordField, validators

from login_form.criteria import MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH
from login_form.exceptions import SchemaValidationError

# Lowercase, uppercase, digit and special character, drawn only from the allowed set
PASSWORD_PATTERN = (
    r'^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])'
    r'[A-Za-z0-9@$!%*?&]{3,9}\Z'
)


class LoginForm(Form):
    """Login form with username and password strength rules."""

    username = StringField('Username', [
        validators.InputRequired(message='Username is required')
    ])

    password = PasswordField('Password', [
        validators.Length(
            min=MIN_PASSWORD_LENGTH,
            message=f'Password must be at least {MIN_PASSWORD_LENGTH} characters'
        ),
        validators.Length(
            max=MAX_PASSWORD_LENGTH,
            message=f'Password must not exceed {MAX_PASSWORD_LENGTH} characters'
        ),
        validators.Regexp(
            PASSWORD_PATTERN,
            message='Password must contain uppercase, lowercase, number and special character'
        )
    ])


class ValidationResult:
    """Outcome of validating the form fields."""

    def __init__(self, errors: dict = None):
        self.errors = errors or {}

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        return f'ValidationResult(errors={self.errors!r})'


def validate_fields(username: str, password: str) -> ValidationResult:
    """Run the login schema against field values.

    Args:
        username: Current username value.
        password: Current password value.

    Returns:
        ValidationResult with per-field error messages.
    """
    form = LoginForm(MultiDict([
        ('username', username),
        ('password', password)
    ]))
    form.validate()
    return ValidationResult({name: list(messages) for name, messages in form.errors.items()})


def require_valid_fields(username: str, password: str) -> None:
    """Validate field values, raising when any rule fails.

    Raises:
        SchemaValidationError: If any field violates the schema.
    """
    result = validate_fields(username, password)
    if not result.is_valid:
        raise SchemaValidationError(result.errors)
