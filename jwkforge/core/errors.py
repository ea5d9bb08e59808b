from __future__ import annotations


class JWKError(Exception):
    code = "jwk_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedAlgorithm(JWKError, ValueError):
    """Algorithm name does not carry a curve, hash or key size we know."""

    code = "unsupported_algorithm"

    def __init__(self, algorithm: str, reason: str) -> None:
        super().__init__(f"Unsupported algorithm {algorithm!r}: {reason}")
        self.algorithm = algorithm


class InvalidKeySize(JWKError, ValueError):
    code = "invalid_key_size"

    def __init__(self, algorithm: str, key_size: int) -> None:
        super().__init__(f"Invalid key size {key_size} for algorithm {algorithm!r}")
        self.algorithm = algorithm
        self.key_size = key_size


class CannotExportWithoutSecret(JWKError):
    """A symmetric key has no public-only form."""

    code = "cannot_export_without_secret"


class DeserializationError(JWKError, ValueError):
    code = "deserialization_error"
