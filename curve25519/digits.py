"""Signed-digit recodings of scalars used by scalar-multiplication algorithms."""

from __future__ import annotations

from curve25519.scalar import Scalar

_SCALAR_BITS = 256


def non_adjacent_form(scalar: Scalar, w: int) -> tuple[int, ...]:
    """Compute the width-w non-adjacent form of a scalar.

    Returns 256 signed digits n_i, least significant first, with
    value = sum(n_i * 2^i).  Every nonzero digit is odd with
    |n_i| < 2^(w-1), and any w consecutive digits hold at most one
    nonzero digit.  The width must satisfy 2 <= w <= 8.
    """
    if not 2 <= w <= 8:
        raise ValueError("NAF width must lie in [2, 8]")

    value = int(scalar)
    width = 1 << w
    window_mask = width - 1

    naf = [0] * _SCALAR_BITS
    pos = 0
    carry = 0
    while pos < _SCALAR_BITS:
        window = carry + ((value >> pos) & window_mask)

        if window & 1 == 0:
            # An even window keeps the carry: either both are zero, or the
            # low bit was set and absorbed the carry into the next bit.
            pos += 1
            continue

        if window < width // 2:
            carry = 0
            naf[pos] = window
        else:
            carry = 1
            naf[pos] = window - width

        pos += w

    return tuple(naf)


def to_radix_16(scalar: Scalar) -> tuple[int, ...]:
    """Write a scalar in radix 16 with signed coefficients.

    Returns 64 digits a_i, least significant first, with
    value = sum(a_i * 16^i), -8 <= a_i < 8 for i < 63 and
    -8 <= a_63 <= 8.
    """
    value = int(scalar)
    if value >> 255:
        raise ValueError("radix-16 recoding requires the top bit to be clear")

    output = [(value >> (4 * i)) & 15 for i in range(64)]

    for i in range(63):
        carry = (output[i] + 8) >> 4
        output[i] -= carry << 4
        output[i + 1] += carry

    return tuple(output)


def to_radix_2w(scalar: Scalar, w: int) -> tuple[int, ...]:
    """Write a scalar in radix 2^w (6 <= w <= 8) with signed coefficients.

    Returns ceil(256 / w) digits a_i, least significant first, with
    value = sum(a_i * 2^(w*i)), -2^w/2 <= a_i < 2^w/2 for all but the
    last digit, which may also equal 2^w/2.
    """
    if not 6 <= w <= 8:
        raise ValueError("radix exponent must lie in [6, 8]")

    value = int(scalar)
    digits_count = (_SCALAR_BITS + w - 1) // w
    radix = 1 << w
    window_mask = radix - 1

    digits: list[int] = []
    carry = 0
    for i in range(digits_count):
        coef = carry + ((value >> (i * w)) & window_mask)
        carry = (coef + radix // 2) >> w
        digits.append(coef - (carry << w))

    # The top bit of a scalar is clear, so the final carry can be folded
    # back into the last digit, which may then reach 2^w / 2.
    digits[-1] += carry << w

    return tuple(digits)