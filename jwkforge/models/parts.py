# jwkforge/models/parts.py
"""
Closed value sets of a JWK (RFC 7517 §4, RFC 7518 §3.1, §6.1).

Each member carries its wire value; ``serialize()`` returns it and
``from_value()`` maps an untrusted token back to a member.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from jwkforge.core.errors import DeserializationError


class _WireEnum(Enum):
    wire: str

    def serialize(self) -> str:
        return self.wire

    @classmethod
    def from_value(cls, token: object):
        """
        Returns the member whose wire value is ``token``, or None when the
        token is outside the set. A null token is rejected outright.
        """
        if token is None:
            raise DeserializationError(f"Cannot deserialize null {cls.__name__}")
        if not isinstance(token, str):
            return None
        for member in cls:
            if member.wire == token:
                return member
        return None


class KeyType(_WireEnum):
    ELLIPTIC_CURVE = ("EllipticCurve", "EC")
    RSA = ("RSA", "RSA")
    HMAC = ("HMAC", "OCT")
    AES = ("AES", "OCT")
    NONE = ("None", "none")

    def __init__(self, label: str, wire: str) -> None:
        self.label = label
        self.wire = wire

    @property
    def is_symmetric(self) -> bool:
        return self in (KeyType.HMAC, KeyType.AES)

    @classmethod
    def from_value(cls, token: object) -> Optional["KeyType"]:
        # "oct" is the RFC spelling; both symmetric types share it, HMAC is returned
        if isinstance(token, str) and token == "oct":
            token = "OCT"
        return super().from_value(token)


class Algorithm(_WireEnum):
    # HMAC
    HS256 = ("HS256", KeyType.HMAC)
    HS384 = ("HS384", KeyType.HMAC)
    HS512 = ("HS512", KeyType.HMAC)

    # RSA (PS256/384/512 not supported)
    RS256 = ("RS256", KeyType.RSA)
    RS384 = ("RS384", KeyType.RSA)
    RS512 = ("RS512", KeyType.RSA)

    # Elliptic Curve
    ES256 = ("ES256", KeyType.ELLIPTIC_CURVE)
    ES384 = ("ES384", KeyType.ELLIPTIC_CURVE)
    ES512 = ("ES512", KeyType.ELLIPTIC_CURVE)

    # AES key wrap
    A128GCMKW = ("A128GCMKW", KeyType.AES)
    A192GCMKW = ("A192GCMKW", KeyType.AES)
    A256GCMKW = ("A256GCMKW", KeyType.AES)

    NONE = ("none", KeyType.NONE)

    def __init__(self, wire: str, key_type: KeyType) -> None:
        self.wire = wire
        self.key_type = key_type

    @property
    def is_symmetric(self) -> bool:
        return self.key_type.is_symmetric


class PublicKeyUse(_WireEnum):
    SIGNATURE = "sig"
    ENCRYPTION = "enc"

    def __init__(self, wire: str) -> None:
        self.wire = wire


class KeyOperation(_WireEnum):
    SIGN = "sign"
    VERIFY = "verify"
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"
    WRAP_KEY = "wrapKey"
    UNWRAP_KEY = "unwrapKey"
    DERIVE_KEY = "deriveKey"
    DERIVE_BITS = "deriveBits"

    def __init__(self, wire: str) -> None:
        self.wire = wire
