# curve25519

Arithmetic for Curve25519 in pure Python, with no dependencies:

- `curve25519.field.FieldElement`: elements of the field of integers
  modulo p = 2^255 - 19 (`curve25519.field.P`), with canonical 32-byte
  little-endian encoding, inversion, batch inversion and square roots of
  ratios. `curve25519.field.SQRT_M1` is the nonnegative square root of -1.
- `curve25519.scalar.Scalar`: integers modulo the group order
  ℓ = 2^252 + 27742317777372353535851937790883648493
  (`curve25519.scalar.L`).
- `curve25519.scalarops`: batch inversion, sums, products, random
  scalars and hashing into scalars.
- `curve25519.digits`: signed-digit forms of a scalar (width-w NAF,
  radix 16, radix 2^w).
- `curve25519.montgomery.MontgomeryPoint`: u-coordinates on the
  Montgomery curve or its twist, multiplied by scalars with the
  Montgomery ladder.

These routines are not constant time. Use them to learn, test or
prototype, not to guard secrets.

## Installation

```
pip install .
```

## Field elements

`FieldElement.from_bytes` takes exactly 32 bytes, ignores the top bit and
reduces modulo p; `to_bytes` always gives the canonical encoding. Values
are kept reduced, so `==` and `hash` follow field equality.

```python
from curve25519.field import FieldElement

two = FieldElement.one() + FieldElement.one()
assert two * two.invert() == FieldElement.one()

ok, root = FieldElement.sqrt_ratio_i(two + two, FieldElement.one())
assert ok and root.square() == two + two
assert not root.is_negative()

inverses = FieldElement.batch_invert([two, two + two])
assert inverses[1] * (two + two) == FieldElement.one()
```

`sqrt_ratio_i(u, v)` returns a flag and the nonnegative root: `(True,
sqrt(u/v))` when u/v is a nonzero square, `(True, 0)` when u is zero,
`(False, 0)` when only v is zero, and `(False, sqrt(i*u/v))` when u/v is
not a square. `invsqrt()` is `sqrt_ratio_i(1, self)`.

## Scalars

```python
from curve25519.scalar import Scalar

six, seven = Scalar.from_int(6), Scalar.from_int(7)
assert six * seven == Scalar.from_int(42)
assert six * six.invert() == Scalar.one()
```

- `from_bytes_mod_order` (32 bytes) and `from_bytes_mod_order_wide`
  (64 bytes) reduce modulo ℓ.
- `from_canonical_bytes` raises `ValueError` if the top bit is set or
  the value is not below ℓ.
- `from_bits` keeps the low 255 bits without reducing; `from_int` takes
  an integer in [0, 2^128). Such scalars may be unreduced: `==`
  compares representatives, so use `reduce()` and `is_canonical()`.
- Arithmetic (`+`, `-`, `*`, unary `-`) always gives reduced results.
- `bits()` returns the 256 bits, least significant first; `s[i]` gives
  byte i of the encoding.

## Collections, randomness and hashing

```python
import hashlib
import random

from curve25519.scalar import Scalar
from curve25519.scalarops import (
    batch_invert, hash_to_scalar, random_scalar, scalar_from_hash,
    scalar_product, scalar_sum,
)

scalars = [Scalar.from_int(n) for n in (3, 5, 7, 11)]
inverses, product_inverse = batch_invert(scalars)
assert product_inverse == scalar_product(scalars).invert()
assert inverses[0] == Scalar.from_int(3).invert()

assert scalar_sum([]) == Scalar.zero()
assert scalar_product([]) == Scalar.one()

s = hash_to_scalar(b"message")            # SHA-512 by default
h = hashlib.sha512(b"mess")
h.update(b"age")
assert scalar_from_hash(h) == s

r = random_scalar()                       # from the OS secure source
r2 = random_scalar(random.Random(1))      # any object with randbytes(n)
```

`batch_invert` raises `ValueError` if any input is zero.
`scalar_from_hash` raises `ValueError` unless the digest is 64 bytes.

## Digit recodings

```python
from curve25519.scalar import Scalar
from curve25519.digits import non_adjacent_form, to_radix_16, to_radix_2w

s = Scalar.from_int(1234567)
naf = non_adjacent_form(s, 5)   # 256 digits, 2 <= w <= 8
r16 = to_radix_16(s)            # 64 digits in [-8, 8)
r2w = to_radix_2w(s, 6)         # ceil(256 / w) digits, 6 <= w <= 8
assert sum(d << i for i, d in enumerate(naf)) == int(s)
```

## Montgomery ladder

```python
from curve25519.montgomery import MontgomeryPoint
from curve25519.scalar import Scalar

base = MontgomeryPoint(bytes([9]) + bytes(31))
shared = base * Scalar.from_int(1234)
assert shared == Scalar.from_int(1234) * base
print(shared.to_bytes().hex())
```

A `MontgomeryPoint` wraps exactly 32 bytes; equality compares the
decoded u-coordinates modulo p. The result of a multiplication is
always canonically encoded, and the identity comes out as u = 0.

## What this package does not do

There is no Edwards or Ristretto group here: points cannot be converted
between the Montgomery u-line and the Edwards curve, added, or
compressed, and there is no key-exchange or signature API and no
command-line tool. Scalar clamping is left to the caller (build the
clamped bytes yourself and pass them to `Scalar.from_bits`).

## Tests

```
pip install .[test]
pytest
```