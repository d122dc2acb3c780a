from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from devconnect.domain.user.exceptions import InvalidEmailError


def normalize_email(value: str) -> str:
    """Trim and lowercase an email address. Idempotent."""
    return value.strip().lower()


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address.

    Syntax is checked with the same validator the request schemas use,
    so any address accepted at the API boundary is accepted here too.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        normalized = normalize_email(self.value)
        try:
            validate_email(normalized, check_deliverability=False)
        except EmailNotValidError as e:
            msg = "Invalid email format"
            raise InvalidEmailError(msg) from e

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
