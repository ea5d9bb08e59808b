from __future__ import annotations

import json

from jwkforge.core.errors import CannotExportWithoutSecret
from jwkforge.crypto.base64url import b64url_decode
from jwkforge.crypto.keygen import HMAC_KEY_LENGTHS, curve_for_algorithm
from jwkforge.models.jwk import build_jwk
from jwkforge.models.parts import Algorithm, KeyType


def main() -> int:
    for alg in Algorithm:
        jwk = build_jwk(alg)
        doc = json.loads(jwk.export(include_private=True))
        assert doc['kty'] == alg.key_type.wire, f'{alg.wire}: wrong kty'
        assert doc['alg'] == alg.wire, f'{alg.wire}: wrong alg'

        # --- EC: coordinates sized to the curve ---
        if alg.key_type is KeyType.ELLIPTIC_CURVE:
            curve = curve_for_algorithm(alg.wire)
            assert doc['crv'] == curve.name, f'{alg.wire}: wrong curve'
            for member in ('x', 'y', 'd'):
                assert len(b64url_decode(doc[member])) == curve.coordinate_len, f'{alg.wire}: bad {member}'

        # --- symmetric: secret length, no public form ---
        if alg.key_type is KeyType.HMAC:
            assert len(b64url_decode(doc['k'])) == HMAC_KEY_LENGTHS[int(alg.wire[2:])]
        if alg.key_type is KeyType.AES:
            assert len(b64url_decode(doc['k'])) * 8 == int(alg.wire[1:4])
        if alg.is_symmetric:
            try:
                jwk.export(include_private=False)
            except CannotExportWithoutSecret:
                pass
            else:
                raise AssertionError(f'{alg.wire}: public-only export should be refused')
            continue

        # --- asymmetric: public export drops d ---
        public = json.loads(jwk.export(include_private=False))
        if alg.key_type is KeyType.NONE:
            assert public == doc, 'none: export should not depend on include_private'
        else:
            assert 'd' in doc and 'd' not in public, f'{alg.wire}: d leaked into public export'

    print('OK: jwk selftest passed')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
