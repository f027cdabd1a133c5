"""Exceptions raised by the login form."""


class LoginFormError(Exception):
    """Base exception for login form failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class SchemaValidationError(LoginFormError):
    """Exception raised when the submitted fields do not satisfy the form schema."""

    def __init__(self, errors: dict):
        self.errors = errors
        fields = ', '.join(sorted(errors))
        super().__init__(f"Invalid fields: {fields}")


class CredentialMismatch(LoginFormError):
    """Exception raised when well-formed credentials do not match."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("Invalid username or password")


class UnknownFieldError(LoginFormError, ValueError):
    """Exception raised when updating a field the form does not have."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown field: {name}")
