# jwkforge/crypto/keygen.py
"""
Key material for each algorithm family, encoded as JWK parameters.

- EC (ES256/384/512): NIST P-256, P-384, P-521 -> crv, x, y (public), d (private)
- RSA (RS256/384/512): settings.rsa_key_size modulus -> n, e (public), d (private)
- HMAC (HS256/384/512): random secret sized per RFC 2104 -> k (private)
- AES (A128/192/256GCMKW): random key of the named size -> k (private)
- none: no key material

The actual generation is delegated to ``cryptography`` and ``os.urandom``.
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Type

from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from jwkforge.core.config import settings
from jwkforge.core.errors import InvalidKeySize, UnsupportedAlgorithm
from jwkforge.crypto.base64url import b64url_encode
from jwkforge.models.key_parameters import KeyParameters
from jwkforge.models.parts import Algorithm, KeyType


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedCurve:
    name: str                       # JWK crv value
    curve: Type[ec.EllipticCurve]
    coordinate_len: int             # bytes per coordinate / private scalar


# ES512 names the hash; the curve is P-521 (RFC 7518 §3.4)
EC_CURVES: Dict[int, NamedCurve] = {
    256: NamedCurve("P-256", ec.SECP256R1, 32),
    384: NamedCurve("P-384", ec.SECP384R1, 48),
    512: NamedCurve("P-521", ec.SECP521R1, 66),
}

# RFC 2104 §3: key at least as long as the hash block size
HMAC_KEY_LENGTHS: Dict[int, int] = {
    256: 64,
    384: 128,
    512: 128,
}

AES_KEY_SIZES = (128, 192, 256)

_EC_NAME = re.compile(r"ES(\d+)")
_HMAC_NAME = re.compile(r"HS(\d+)")
_AES_NAME = re.compile(r"A(\d+)GCMKW")


def _parse_size(name: str, pattern: "re.Pattern[str]", family: str) -> int:
    match = pattern.fullmatch(name)
    if match is None:
        raise UnsupportedAlgorithm(name, f"not a {family} algorithm name")
    return int(match.group(1))


def curve_for_algorithm(name: str) -> NamedCurve:
    size = _parse_size(name, _EC_NAME, "EC")
    try:
        return EC_CURVES[size]
    except KeyError:
        raise UnsupportedAlgorithm(name, f"no curve for size {size}") from None


def hmac_key_length(name: str) -> int:
    """Secret length in bytes for an HS<bits> algorithm name."""
    sha_bits = _parse_size(name, _HMAC_NAME, "HMAC")
    try:
        return HMAC_KEY_LENGTHS[sha_bits]
    except KeyError:
        raise UnsupportedAlgorithm(name, f"no SHA-2 variant with {sha_bits} bits") from None


def aes_key_bits(name: str) -> int:
    bits = _parse_size(name, _AES_NAME, "AES key wrap")
    if bits not in AES_KEY_SIZES:
        raise InvalidKeySize(name, bits)
    return bits


def int_to_bytes(value: int, length: Optional[int] = None) -> bytes:
    """Big-endian octets; minimal length unless a fixed ``length`` is given."""
    if length is None:
        length = max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(length, "big")


def _wipe(buf: bytearray) -> None:
    for i in range(len(buf)):
        buf[i] = 0


def _encode_secret(buf: bytearray) -> str:
    """
    Encode ``buf`` in place and zero it afterwards.

    Best effort only: the immutable bytes or ints the buffer was copied from
    (os.urandom output, AESGCM keys, private numbers) cannot be wiped.
    """
    try:
        return b64url_encode(buf)
    finally:
        _wipe(buf)


def generate_ec_parameters(algorithm: Algorithm) -> KeyParameters:
    curve = curve_for_algorithm(algorithm.wire)
    sk = ec.generate_private_key(curve.curve())

    numbers = sk.private_numbers()
    public = numbers.public_numbers
    x = int_to_bytes(public.x, curve.coordinate_len)
    y = int_to_bytes(public.y, curve.coordinate_len)
    d = bytearray(int_to_bytes(numbers.private_value, curve.coordinate_len))

    return KeyParameters.of(
        ("crv", curve.name, False),
        ("x", b64url_encode(x), False),
        ("y", b64url_encode(y), False),
        ("d", _encode_secret(d), True),
    )


def generate_rsa_parameters(algorithm: Algorithm) -> KeyParameters:
    sk = rsa.generate_private_key(
        public_exponent=settings.rsa_public_exponent,
        key_size=settings.rsa_key_size,
    )

    numbers = sk.private_numbers()
    public = numbers.public_numbers
    d = bytearray(int_to_bytes(numbers.d))

    return KeyParameters.of(
        ("n", b64url_encode(int_to_bytes(public.n)), False),
        ("e", b64url_encode(int_to_bytes(public.e)), False),
        ("d", _encode_secret(d), True),
    )


def generate_hmac_parameters(algorithm: Algorithm) -> KeyParameters:
    secret = bytearray(os.urandom(hmac_key_length(algorithm.wire)))
    return KeyParameters.of(("k", _encode_secret(secret), True))


def generate_aes_parameters(algorithm: Algorithm) -> KeyParameters:
    key = bytearray(AESGCM.generate_key(bit_length=aes_key_bits(algorithm.wire)))
    return KeyParameters.of(("k", _encode_secret(key), True))


_GENERATORS: Dict[KeyType, Callable[[Algorithm], KeyParameters]] = {
    KeyType.ELLIPTIC_CURVE: generate_ec_parameters,
    KeyType.RSA: generate_rsa_parameters,
    KeyType.HMAC: generate_hmac_parameters,
    KeyType.AES: generate_aes_parameters,
}


def generate_key_parameters(algorithm: Algorithm) -> Optional[KeyParameters]:
    """Returns None for ``Algorithm.NONE``."""
    generator = _GENERATORS.get(algorithm.key_type)
    if generator is None:
        return None
    logger.debug("generating %s key material for %s", algorithm.key_type.label, algorithm.wire)
    return generator(algorithm)
