"""Request signing for authenticated Dizzyjam API calls."""

import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote_plus, urlencode

from dizzyjam.errors import UnauthenticatedError

API_VERSION = "v1"


@dataclass(frozen=True)
class Credentials:
    """API ID and key pair used to sign requests."""

    auth_id: str
    api_key: str

    def __repr__(self) -> str:
        return f"Credentials(auth_id={self.auth_id!r}, api_key='***')"


def encode_value(value: Any) -> str:
    """Render a scalar parameter the way the API's form decoder expects it."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        # Integral floats drop their fraction: 1.0 -> "1".
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return repr(value)
    return str(value)


def build_query(params: dict) -> str:
    """Form-encode parameters, skipping ``None`` values.

    Args:
        params: Mapping of parameter names to scalar values.

    Returns:
        ``key=value&...`` string with values percent-encoded (spaces as ``+``).
    """
    return urlencode(
        [(k, encode_value(v)) for k, v in params.items() if v is not None]
    )


def signature_base(method: str, params: dict) -> str:
    """Build the canonical string that gets signed.

    Keys are sorted, the mapping is form-encoded and then the whole string
    is percent-decoded again.

    Args:
        method: API method path (e.g. order/checkout).
        params: All request parameters, including auth_id and auth_ts.

    Returns:
        The string ``v1/{method}?{canonical query}``.
    """
    canonical = unquote_plus(build_query(dict(sorted(params.items()))))
    return f"{API_VERSION}/{method}?{canonical}"


def sign(
    credentials: Credentials | None,
    method: str,
    params: dict,
    timestamp: int | None = None,
) -> dict:
    """Add authentication fields to a set of request parameters.

    Args:
        credentials: API credentials, or None when none are configured.
        method: API method path (e.g. manage/my_stores).
        params: Request parameters. Any existing auth_sig is discarded.
        timestamp: Unix time in seconds; defaults to the current time.

    Returns:
        A new dict holding the parameters plus auth_id, auth_ts and auth_sig.

    Raises:
        UnauthenticatedError: If no complete credentials are configured.
    """
    if credentials is None or not (credentials.auth_id and credentials.api_key):
        details = {"method": method, "params": params}
        raise UnauthenticatedError("API credentials not configured", 401, details)

    signed = {
        k: v for k, v in params.items() if k != "auth_sig" and v is not None
    }
    signed["auth_id"] = credentials.auth_id
    signed["auth_ts"] = int(time.time()) if timestamp is None else timestamp

    base = signature_base(method, signed)
    signed["auth_sig"] = hmac.new(
        credentials.api_key.encode("utf-8"),
        base.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    return signed
