# jwkforge/crypto/base64url.py
import base64
from typing import Optional, Union


def b64url_encode(data: Optional[Union[bytes, bytearray]]) -> str:
    """URL-safe base64 without '=' padding (RFC 7515 §2). Empty or None gives ''."""
    if not data:
        return ""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(s: str) -> bytes:
    """
    Strict inverse of ``b64url_encode``.

    Rejects padding, characters outside the URL-safe alphabet and encodings
    with non-zero trailing bits, so only canonical input decodes.
    """
    if not s:
        return b""
    if "=" in s:
        raise ValueError("base64url input must not be padded")
    padding = -len(s) % 4
    if padding == 3:
        raise ValueError("Invalid base64url length")
    data = base64.b64decode(s + "=" * padding, altchars=b"-_", validate=True)
    # '+' and '/' survive altchars translation; re-encoding catches them and stray trailing bits
    if b64url_encode(data) != s:
        raise ValueError("Non-canonical base64url input")
    return data
