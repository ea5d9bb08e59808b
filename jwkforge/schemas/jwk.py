from __future__ import annotations

import json
from typing import List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from jwkforge.core.errors import DeserializationError
from jwkforge.models.parts import Algorithm, KeyOperation, KeyType, PublicKeyUse


class JWKDocument(BaseModel):
    """Outgoing JWK: header members first, key parameters flattened in as extras."""
    model_config = ConfigDict(extra='allow')

    kty: str
    use: Optional[str] = None
    key_ops: Optional[List[str]] = None
    alg: Optional[str] = None
    kid: Optional[str] = None


def _member(enum_cls, v, field: str):
    if isinstance(v, enum_cls):
        return v
    member = enum_cls.from_value(v)
    if member is None:
        raise ValueError(f"Unknown {field} value {v!r}")
    return member


class KeyParts(BaseModel):
    """
    Descriptive members of an incoming JWK resolved to their enum members.

    Key material is not read; parameter members are ignored.
    """
    model_config = ConfigDict(extra='ignore', frozen=True)

    key_type: KeyType = Field(alias='kty')
    use: Optional[PublicKeyUse] = None
    key_ops: Optional[List[KeyOperation]] = None
    alg: Optional[Algorithm] = None
    kid: Optional[UUID] = None

    @field_validator('key_type', mode='before')
    @classmethod
    def validate_kty(cls, v):
        return _member(KeyType, v, 'kty')

    @field_validator('use', mode='before')
    @classmethod
    def validate_use(cls, v):
        if v is None:
            return None
        return _member(PublicKeyUse, v, 'use')

    @field_validator('alg', mode='before')
    @classmethod
    def validate_alg(cls, v):
        if v is None:
            return None
        return _member(Algorithm, v, 'alg')

    @field_validator('key_ops', mode='before')
    @classmethod
    def validate_key_ops(cls, v):
        if v is None:
            return None
        if not isinstance(v, list):
            raise ValueError('key_ops must be an array')
        ops = [_member(KeyOperation, op, 'key_ops') for op in v]
        if len(set(ops)) != len(ops):
            raise ValueError('key_ops must not contain duplicates')
        return ops

    @model_validator(mode='before')
    @classmethod
    def resolve_symmetric_kty(cls, data):
        # "OCT" alone cannot tell HMAC from AES; alg decides when present
        if not isinstance(data, dict):
            return data
        kty = KeyType.from_value(data['kty']) if data.get('kty') is not None else None
        alg = Algorithm.from_value(data['alg']) if data.get('alg') is not None else None
        if kty is None or alg is None:
            return data
        if kty.wire != alg.key_type.wire:
            raise ValueError(f"kty {kty.wire!r} does not match alg {alg.wire!r}")
        return {**data, 'kty': alg.key_type}


def read_key_parts(document: Union[str, bytes, dict]) -> KeyParts:
    try:
        if isinstance(document, (str, bytes)):
            document = json.loads(document)
    except (ValueError, RecursionError) as e:
        raise DeserializationError(f"Malformed JWK document: {e}") from e
    if not isinstance(document, dict):
        raise DeserializationError("JWK document must be a JSON object")

    try:
        return KeyParts.model_validate(document)
    except ValidationError as e:
        raise DeserializationError(f"Invalid JWK document: {e}") from e
