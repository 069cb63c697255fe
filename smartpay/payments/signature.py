"""SmartPay MD5 signature utilities."""

import hashlib
import hmac
import secrets
import string
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import quote_plus

DEFAULT_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase

SIGN_TYPE = "MD5"

# Signing metadata, never part of the signed string
RESERVED_KEYS = ("sign_type", "signature")


def random_string(length: int = 16, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Generate a random token (used as nonce_str).

    Each character is picked independently and uniformly from `alphabet`.
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    if not alphabet:
        raise ValueError("alphabet must not be empty")

    return "".join(secrets.choice(alphabet) for _ in range(length))


def to_field_value(value: Any) -> str:
    """Render a field value as the string that gets signed and sent.

    Examples: True -> "1", False -> "", 100 -> "100", Decimal("1E+2") -> "100"
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def normalize_fields(fields: Mapping[str, Any]) -> dict[str, str]:
    """Convert caller values to strings, dropping None values."""
    return {
        key: to_field_value(value)
        for key, value in fields.items()
        if value is not None
    }


def render_received(fields: Mapping[str, Any]) -> dict[str, str]:
    """Convert received values to strings, rendering None as ""."""
    return {
        key: "" if value is None else to_field_value(value)
        for key, value in fields.items()
    }


def strip_reserved(fields: Mapping[str, str]) -> dict[str, str]:
    return {key: value for key, value in fields.items() if key not in RESERVED_KEYS}


def build_sign_string(fields: Mapping[str, str], secret_key: str) -> str:
    """Build the string the signature is computed over.

    Format: k1=v1&k2=v2...{secret_key}, keys sorted by byte value
    """
    data = strip_reserved(fields)
    sorted_keys = sorted(data, key=lambda k: k.encode("utf-8"))
    joined = "&".join(f"{key}={data[key]}" for key in sorted_keys)
    return joined + secret_key


def sign(fields: Mapping[str, str], secret_key: str) -> str:
    """Generate signature for a field map.

    Args:
        fields: Field names to string values
        secret_key: Merchant sign key

    Returns:
        MD5 hash in lowercase
    """
    data = build_sign_string(fields, secret_key)
    return hashlib.md5(data.encode("utf-8")).hexdigest()


def verify_signature(fields: Mapping[str, Any], secret_key: str) -> bool:
    """Verify the `signature` carried inside a field map.

    Args:
        fields: Received fields including `signature`
        secret_key: Merchant sign key

    Returns:
        True if signature is present and valid
    """
    if "signature" not in fields:
        return False

    received = to_field_value(fields["signature"])
    expected = sign(render_received(strip_reserved(fields)), secret_key)
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))


def build_signed_query(fields: Mapping[str, str], signature: str) -> str:
    """Build the final query string.

    Fields keep their order, values are URL-encoded, then
    `signature=<hex>&sign_type=MD5` is appended.
    """
    parts = [f"{key}={quote_plus(value)}" for key, value in strip_reserved(fields).items()]
    parts.append(f"signature={signature}")
    parts.append(f"sign_type={SIGN_TYPE}")
    return "&".join(parts)
