from jwkforge.core.errors import (
    CannotExportWithoutSecret,
    DeserializationError,
    InvalidKeySize,
    JWKError,
    UnsupportedAlgorithm,
)
from jwkforge.crypto.base64url import b64url_decode, b64url_encode
from jwkforge.models.jwk import JWK, build_jwk
from jwkforge.models.key_parameters import KeyParameter, KeyParameters
from jwkforge.models.parts import Algorithm, KeyOperation, KeyType, PublicKeyUse
from jwkforge.schemas.jwk import KeyParts, read_key_parts

__all__ = [
    "Algorithm",
    "CannotExportWithoutSecret",
    "DeserializationError",
    "InvalidKeySize",
    "JWK",
    "JWKError",
    "KeyOperation",
    "KeyParameter",
    "KeyParameters",
    "KeyParts",
    "KeyType",
    "PublicKeyUse",
    "UnsupportedAlgorithm",
    "b64url_decode",
    "b64url_encode",
    "build_jwk",
    "read_key_parts",
]
