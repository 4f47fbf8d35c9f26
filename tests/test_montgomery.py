import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from curve25519.field import FieldElement
from curve25519.montgomery import MontgomeryPoint
from curve25519.scalar import Scalar

BASEPOINT = MontgomeryPoint(bytes([9]) + bytes(31))


def _clamp(data: bytes) -> Scalar:
    raw = bytearray(data)
    raw[0] &= 248
    raw[31] &= 127
    raw[31] |= 64
    return Scalar.from_bits(bytes(raw))


def _x25519(k: bytes, u: bytes) -> bytes:
    return (MontgomeryPoint(u) * _clamp(k)).to_bytes()


def test_eq_defined_mod_p():
    u18 = MontgomeryPoint(bytes([18]) + bytes(31))
    u18_unreduced = MontgomeryPoint(bytes([255] * 32))
    assert u18 == u18_unreduced
    assert hash(u18) == hash(u18_unreduced)


def test_default_is_zero():
    assert MontgomeryPoint().to_bytes() == bytes(32)


def test_inequality():
    assert BASEPOINT != MontgomeryPoint()


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        MontgomeryPoint(bytes(31))


def test_rfc7748_vector_one():
    k = bytes.fromhex("a546e36bf0527c9d3b16154b82465edd62144c0ac1fc5a18506a2244ba449ac4")
    u = bytes.fromhex("e6db6867583030db3594c1a424b15f7c726624ec26b3353b10a903a6d0ab1c4c")
    expected = bytes.fromhex(
        "c3da55379de9c6908e94ea4df28d084f32eccf03491c71f754b4075577a28552"
    )
    assert _x25519(k, u) == expected


def test_rfc7748_single_iteration():
    k = bytes([9]) + bytes(31)
    expected = bytes.fromhex(
        "422c8e7a6227d7bca1350b3e2bb7279f7897b87bb6854b783c60e80311ae3079"
    )
    assert _x25519(k, k) == expected


def test_rfc7748_diffie_hellman():
    alice_private = bytes.fromhex(
        "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a"
    )
    bob_private = bytes.fromhex(
        "5dab087e624a8a4b79e17f8b83800ee66f3bb1292618b6fd1c2f8b27ff88e0eb"
    )
    alice_public = _clamp(alice_private) * BASEPOINT
    bob_public = _clamp(bob_private) * BASEPOINT
    assert alice_public.to_bytes().hex() == (
        "8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a"
    )
    assert bob_public.to_bytes().hex() == (
        "de9edb7d7b7dc1b4d35b61c2ece435373f8343c85b78674dadfc7e146f882b4f"
    )
    shared_a = bob_public * _clamp(alice_private)
    shared_b = alice_public * _clamp(bob_private)
    assert shared_a == shared_b
    assert shared_a.to_bytes().hex() == (
        "4a5d9d5ba4ce2de1728e3bf480350f25e07e21c947d19e3376f09b3c1e161742"
    )


def test_multiply_by_zero_gives_identity_encoding():
    assert (BASEPOINT * Scalar.zero()).to_bytes() == bytes(32)


def test_multiply_by_one_is_identity_map():
    assert BASEPOINT * Scalar.one() == BASEPOINT


def test_multiply_by_one_reduces_encoding():
    point = MontgomeryPoint(bytes([255] * 32))
    assert (point * Scalar.one()).to_bytes() == bytes([18]) + bytes(31)


def test_left_and_right_multiplication_agree():
    s = Scalar.from_int(999)
    assert s * BASEPOINT == BASEPOINT * s


def test_multiplying_by_non_scalar_raises():
    with pytest.raises(TypeError):
        BASEPOINT * 3
    assert BASEPOINT.to_bytes() == bytes([9]) + bytes(31)
    assert (BASEPOINT * Scalar.one()).to_bytes() == bytes([9]) + bytes(31)


def test_in_place_multiplication():
    point = BASEPOINT
    point *= Scalar.from_int(7)
    assert point == BASEPOINT * Scalar.from_int(7)


def test_doubling_matches_formula():
    # u([2]P) = (u^2 - 1)^2 / (4 u (u^2 + A u + 1))
    u = FieldElement(9)
    one = FieldElement.one()
    numerator = (u.square() - one).square()
    denominator = FieldElement(4) * u * (u.square() + FieldElement(486662) * u + one)
    expected = (numerator * denominator.invert()).to_bytes()
    assert (BASEPOINT * Scalar.from_int(2)).to_bytes() == expected


@settings(max_examples=15, deadline=None)
@given(st.integers(min_value=1, max_value=2**64), st.integers(min_value=1, max_value=2**64))
def test_scalar_multiplication_composes(a, b):
    sa = Scalar.from_int(a)
    sb = Scalar.from_int(b)
    assert (BASEPOINT * sb) * sa == BASEPOINT * (sa * sb)


@settings(max_examples=10, deadline=None)
@given(st.integers(min_value=1, max_value=2**64))
def test_negated_scalar_gives_same_u(a):
    s = Scalar.from_int(a)
    assert BASEPOINT * s == BASEPOINT * (-s)