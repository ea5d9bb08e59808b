# jwkforge/models/jwk.py
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from jwkforge.core.errors import CannotExportWithoutSecret, UnsupportedAlgorithm
from jwkforge.core.instrumentation import Hook, instrumented
from jwkforge.crypto.keygen import generate_key_parameters
from jwkforge.models.key_parameters import KeyParameters
from jwkforge.models.parts import Algorithm, KeyOperation, KeyType, PublicKeyUse
from jwkforge.schemas.jwk import JWKDocument


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JWK:
    """
    A generated JSON Web Key (RFC 7517).

    Instances are immutable and come from ``build_jwk`` (or ``JWK.build``);
    every build generates fresh key material and a fresh kid.

    - key_type: kty (required)
    - use, key_ops, algorithm, kid: optional header members
    - parameters: key material, None for alg "none"
    """
    key_type: KeyType
    use: Optional[PublicKeyUse] = None
    key_ops: Optional[Tuple[KeyOperation, ...]] = None
    algorithm: Optional[Algorithm] = None
    kid: Optional[uuid.UUID] = None
    parameters: Optional[KeyParameters] = None

    @classmethod
    def build(
        cls,
        algorithm: Union[Algorithm, str],
        use: Union[PublicKeyUse, str, None] = None,
        key_ops: Union[KeyOperation, Iterable[KeyOperation], None] = None,
        *,
        hook: Optional[Hook] = None,
    ) -> "JWK":
        return build_jwk(algorithm, use, key_ops, hook=hook)

    @property
    def is_symmetric(self) -> bool:
        return self.key_type.is_symmetric

    def fields(self, include_private: bool = False) -> Dict[str, Any]:
        """Ordered JWK members, private key parameters dropped unless requested."""
        out: Dict[str, Any] = {"kty": self.key_type.serialize()}
        if self.use is not None:
            out["use"] = self.use.serialize()
        if self.key_ops is not None:
            out["key_ops"] = [op.serialize() for op in self.key_ops]
        if self.algorithm is not None:
            out["alg"] = self.algorithm.serialize()
        if self.kid is not None:
            out["kid"] = str(self.kid)
        if self.parameters is not None:
            out.update(self.parameters.project(include_private))
        return out

    def _document(self, include_private: bool) -> JWKDocument:
        if self.is_symmetric and not include_private:
            raise CannotExportWithoutSecret(
                f"{self.key_type.label} key has no public form; export it with include_private=True"
            )
        return JWKDocument.model_validate(self.fields(include_private))

    def to_dict(self, include_private: bool = False) -> Dict[str, Any]:
        return self._document(include_private).model_dump(exclude_none=True)

    def export(self, include_private: bool = False, *, hook: Optional[Hook] = None) -> str:
        """
        Serialize to a compact JSON document.

        Raises CannotExportWithoutSecret for HMAC/AES keys when
        ``include_private`` is False.
        """
        alg = self.algorithm.wire if self.algorithm is not None else self.key_type.wire
        with instrumented("export", alg, hook):
            return self._document(include_private).model_dump_json(exclude_none=True)


def _resolve_use(use: Union[PublicKeyUse, str, None]) -> Optional[PublicKeyUse]:
    if use is None or isinstance(use, PublicKeyUse):
        return use
    if not isinstance(use, str):
        raise TypeError(f"use must be PublicKeyUse, got {use!r}")
    resolved = PublicKeyUse.from_value(use)
    if resolved is None:
        raise ValueError(f"Unknown public key use {use!r}")
    return resolved


def _resolve_algorithm(algorithm: Union[Algorithm, str]) -> Algorithm:
    if isinstance(algorithm, Algorithm):
        return algorithm
    resolved = Algorithm.from_value(algorithm)
    if resolved is None:
        raise UnsupportedAlgorithm(str(algorithm), "unknown algorithm")
    return resolved


def _key_ops(key_ops: Union[KeyOperation, Iterable[KeyOperation], None]) -> Optional[Tuple[KeyOperation, ...]]:
    if key_ops is None:
        return None
    if isinstance(key_ops, KeyOperation):
        return (key_ops,)
    ops = tuple(key_ops)
    for op in ops:
        if not isinstance(op, KeyOperation):
            raise TypeError(f"key_ops entries must be KeyOperation, got {op!r}")
    if len(set(ops)) != len(ops):
        raise ValueError("key_ops must not contain duplicates")
    return ops


def build_jwk(
    algorithm: Union[Algorithm, str],
    use: Union[PublicKeyUse, str, None] = None,
    key_ops: Union[KeyOperation, Iterable[KeyOperation], None] = None,
    *,
    hook: Optional[Hook] = None,
) -> JWK:
    """
    Generate a new key for ``algorithm`` and wrap it as a JWK.

    The key type follows from the algorithm. Raises UnsupportedAlgorithm for
    names outside the supported set.
    """
    alg = _resolve_algorithm(algorithm)
    ops = _key_ops(key_ops)
    key_use = _resolve_use(use)

    with instrumented("build", alg.wire, hook):
        jwk = JWK(
            key_type=alg.key_type,
            use=key_use,
            key_ops=ops,
            algorithm=alg,
            kid=uuid.uuid4(),
            parameters=generate_key_parameters(alg),
        )

    logger.debug("built %s JWK kid=%s", alg.wire, jwk.kid)
    return jwk
