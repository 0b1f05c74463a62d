"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate

# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_BYTES = 72


def validate_password_bytes(value: str) -> None:
    """Reject passwords whose UTF-8 form exceeds bcrypt's input window."""
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValidationError(f"Must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded.")


class CredentialsSchema(Schema):
    """Input payload shared by registration and login."""

    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(
        required=True, validate=[validate.Length(min=8), validate_password_bytes]
    )


class RegisterSchema(CredentialsSchema):
    """Input payload for account registration."""


class LoginSchema(CredentialsSchema):
    """Input payload for login.

    No minimum length: a short password is simply wrong, not malformed.
    """

    password = fields.String(
        required=True, validate=[validate.Length(min=1), validate_password_bytes]
    )


class RefreshSchema(Schema):
    """Input payload for token rotation."""

    class Meta:
        unknown = EXCLUDE

    refresh_token = fields.String(
        required=True, data_key="refreshToken", validate=validate.Length(min=1)
    )


class TokenPairSchema(Schema):
    """Output shape ``{accessToken, refreshToken}``."""

    access_token = fields.String(required=True, data_key="accessToken")
    refresh_token = fields.String(required=True, data_key="refreshToken")
