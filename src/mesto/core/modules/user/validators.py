from pydantic import EmailStr, TypeAdapter

from mesto.errors import ValidationError

# bcrypt only reads the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72

_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)


def validate_password(password: str) -> None:
    """Validate password meets requirements.

    Requirements:
    - Not empty
    - At most 72 bytes in UTF-8

    Raises:
        ValidationError: If password doesn't meet requirements
    """
    if not password:
        raise ValidationError("Password must not be empty")

    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")


def normalize_email(email: str) -> str:
    """Return email in the form it is stored in, raising pydantic.ValidationError if it is not an address."""
    return _email_adapter.validate_python(email)
