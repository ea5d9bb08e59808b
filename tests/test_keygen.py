import pytest
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from jwkforge.core.config import settings
from jwkforge.core.errors import InvalidKeySize, UnsupportedAlgorithm
from jwkforge.crypto import keygen
from jwkforge.crypto.base64url import b64url_decode
from jwkforge.models.parts import Algorithm


@pytest.mark.parametrize(
    "name, crv, size",
    [("ES256", "P-256", 32), ("ES384", "P-384", 48), ("ES512", "P-521", 66)],
)
def test_curve_for_algorithm(name, crv, size):
    curve = keygen.curve_for_algorithm(name)
    assert curve.name == crv
    assert curve.coordinate_len == size


@pytest.mark.parametrize("name", ["ES", "ES255", "ES2560", "XES256", "ES256 ", "ES521"])
def test_curve_for_algorithm_rejects_unknown_suffix(name):
    with pytest.raises(UnsupportedAlgorithm):
        keygen.curve_for_algorithm(name)


def test_hmac_key_lengths():
    assert keygen.hmac_key_length("HS256") == 64
    assert keygen.hmac_key_length("HS384") == 128
    assert keygen.hmac_key_length("HS512") == 128


@pytest.mark.parametrize("name", ["HS1", "HS224", "HSxyz", "RS256"])
def test_hmac_rejects_unknown_variants(name):
    with pytest.raises(UnsupportedAlgorithm):
        keygen.hmac_key_length(name)


def test_aes_key_bits():
    assert [keygen.aes_key_bits(n) for n in ("A128GCMKW", "A192GCMKW", "A256GCMKW")] == [128, 192, 256]


@pytest.mark.parametrize("name, bits", [("A100GCMKW", 100), ("A512GCMKW", 512), ("A64GCMKW", 64)])
def test_aes_rejects_unsupported_size(name, bits):
    with pytest.raises(InvalidKeySize) as exc:
        keygen.aes_key_bits(name)
    assert exc.value.key_size == bits
    assert exc.value.code == "invalid_key_size"


@pytest.mark.parametrize("name", ["AGCMKW", "A128KW", "A128GCM"])
def test_aes_rejects_unparsable_name(name):
    with pytest.raises(UnsupportedAlgorithm):
        keygen.aes_key_bits(name)


def test_int_to_bytes():
    assert keygen.int_to_bytes(65537) == b"\x01\x00\x01"
    assert keygen.int_to_bytes(0) == b"\x00"
    assert keygen.int_to_bytes(1, 4) == b"\x00\x00\x00\x01"


@pytest.mark.parametrize("alg", [Algorithm.ES256, Algorithm.ES384, Algorithm.ES512])
def test_ec_parameters_describe_a_valid_key(alg):
    params = keygen.generate_ec_parameters(alg)
    assert list(params) == ["crv", "x", "y", "d"]
    assert [params.is_private(n) for n in params] == [False, False, False, True]

    curve = keygen.curve_for_algorithm(alg.wire)
    x, y, d = (int.from_bytes(b64url_decode(params[n]), "big") for n in ("x", "y", "d"))
    for n in ("x", "y", "d"):
        assert len(b64url_decode(params[n])) == curve.coordinate_len

    # the private scalar must derive the published point
    public = ec.derive_private_key(d, curve.curve()).public_key().public_numbers()
    assert (public.x, public.y) == (x, y)


def test_rsa_parameters_follow_settings():
    params = keygen.generate_rsa_parameters(Algorithm.RS256)
    assert list(params) == ["n", "e", "d"]
    assert params["e"] == "AQAB"
    assert params.is_private("d")
    assert not params.is_private("n")

    n = int.from_bytes(b64url_decode(params["n"]), "big")
    assert n.bit_length() == settings.rsa_key_size


def test_rsa_private_exponent_inverts_public(monkeypatch):
    captured = {}
    real = rsa.generate_private_key

    def spy(**kwargs):
        captured["key"] = real(**kwargs)
        return captured["key"]

    monkeypatch.setattr(keygen.rsa, "generate_private_key", spy)
    params = keygen.generate_rsa_parameters(Algorithm.RS384)
    numbers = captured["key"].private_numbers()
    assert int.from_bytes(b64url_decode(params["d"]), "big") == numbers.d
    assert int.from_bytes(b64url_decode(params["n"]), "big") == numbers.public_numbers.n


@pytest.mark.parametrize("alg, length", [(Algorithm.HS256, 64), (Algorithm.HS384, 128), (Algorithm.HS512, 128)])
def test_hmac_secret_length(alg, length):
    params = keygen.generate_hmac_parameters(alg)
    assert list(params) == ["k"]
    assert params.is_private("k")
    assert len(b64url_decode(params["k"])) == length


@pytest.mark.parametrize("alg, length", [(Algorithm.A128GCMKW, 16), (Algorithm.A192GCMKW, 24), (Algorithm.A256GCMKW, 32)])
def test_aes_key_length(alg, length):
    params = keygen.generate_aes_parameters(alg)
    assert params.is_private("k")
    assert len(b64url_decode(params["k"])) == length


def test_secret_buffer_is_wiped(monkeypatch):
    buffers = []
    real = keygen._encode_secret

    def keep(buf):
        buffers.append(buf)
        return real(buf)

    monkeypatch.setattr(keygen, "_encode_secret", keep)
    params = keygen.generate_hmac_parameters(Algorithm.HS256)
    assert len(buffers) == 1
    assert buffers[0] == bytearray(64)
    assert params["k"] != ""


def test_dispatch_none_has_no_parameters():
    assert keygen.generate_key_parameters(Algorithm.NONE) is None


def test_dispatch_uses_key_type(monkeypatch):
    calls = []
    monkeypatch.setitem(keygen._GENERATORS, Algorithm.ES256.key_type, lambda alg: calls.append(alg))
    keygen.generate_key_parameters(Algorithm.ES384)
    assert calls == [Algorithm.ES384]
